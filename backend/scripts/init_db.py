"""Create the clinic tables.

Usage (from project root or backend/ directory):

    python backend/scripts/init_db.py            # create missing tables
    python backend/scripts/init_db.py --drop     # drop everything first (development only)

The target database comes from DATABASE_URL (.env or environment).
"""
import asyncio
import argparse
import sys
import os

# Ensure parent directory (backend) is on sys.path so that 'clinic' package is importable
_SCRIPT_DIR = os.path.dirname(__file__)
_BACKEND_DIR = os.path.abspath(os.path.join(_SCRIPT_DIR, ".."))
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

from clinic.core.config import settings
from clinic.db.base import Base, engine, init_models


async def async_main(args: argparse.Namespace):
    await init_models(engine, drop=args.drop)
    await engine.dispose()
    print(f"[OK] {len(Base.metadata.tables)} tables ready on {settings.DATABASE_URL}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Create (or recreate) the clinic schema.")
    p.add_argument("--drop", action="store_true", help="Drop all tables before creating them")
    return p


def main():
    args = build_parser().parse_args()
    asyncio.run(async_main(args))


if __name__ == "__main__":
    main()
