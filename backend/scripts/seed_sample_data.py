"""Seed the clinic database with the small sample data set.

Usage (from project root or backend/ directory):

    python backend/scripts/seed_sample_data.py
    python backend/scripts/seed_sample_data.py --reset   # drop and recreate tables first

What it inserts (through the data-access services, so every constraint is checked):
  - departments: General Medicine, Pediatrics
  - specialties: General Practice, Pediatrics
  - doctors: Amina Mohammed (General Medicine), Chinedu Okeke (Pediatrics), one specialty each
  - patient: Damilola Adebisi
  - appointment: Damilola with Amina on 2025-09-20 10:00, "Regular check-up"
  - treatments: T001 General Consultation 1500.00, T002 Blood Test 2500.00

Safety:
  - Every sample row is looked up by its natural key (name, email, code, ...) first
    and only created when missing, so re-running completes a partially seeded
    database and never duplicates rows.
  - Reports "skipped" when the whole sample set is already present.
"""
import asyncio
import argparse
import sys
import os
from datetime import date, datetime
from decimal import Decimal

# Ensure parent directory (backend) is on sys.path so that 'clinic' package is importable
_SCRIPT_DIR = os.path.dirname(__file__)
_BACKEND_DIR = os.path.abspath(os.path.join(_SCRIPT_DIR, ".."))
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

from sqlalchemy.ext.asyncio import AsyncSession

from clinic.db.base import AsyncSessionLocal, engine, init_models
from clinic.services.catalog_service import department_service, specialty_service, treatment_service
from clinic.services.doctor_service import doctor_service, doctor_specialty_service
from clinic.services.patient_service import patient_service
from clinic.services.appointment_service import appointment_service


DEPARTMENTS = [
    {"name": "General Medicine", "description": "General outpatient services"},
    {"name": "Pediatrics", "description": "Child healthcare"},
]

SPECIALTIES = [
    {"name": "General Practice", "description": "Primary care"},
    {"name": "Pediatrics", "description": "Child specialist"},
]

# (first_name, last_name, email, phone, department index, specialty index)
DOCTORS = [
    ("Amina", "Mohammed", "amina.mohammed@example.com", "+2347012345678", 0, 0),
    ("Chinedu", "Okeke", "chinedu.okeke@example.com", "+2348012345678", 1, 1),
]

PATIENTS = [
    {
        "first_name": "Damilola",
        "last_name": "Adebisi",
        "date_of_birth": date(2000, 5, 14),
        "gender": "Female",
        "email": "dami@example.com",
        "phone": "07043921320",
    },
]

TREATMENTS = [
    {"code": "T001", "name": "General Consultation", "price": Decimal("1500.00")},
    {"code": "T002", "name": "Blood Test", "price": Decimal("2500.00")},
]


async def ensure(session: AsyncSession, service, lookup: dict, data: dict, created: dict):
    """按自然键查找, 不存在时创建; created 按表名累计新建行数"""
    existing = await service.list(session, **lookup).all()
    if existing:
        return existing[0]
    row = await service.create(session, {**lookup, **data})
    created[service.label] = created.get(service.label, 0) + 1
    return row


async def seed(session: AsyncSession) -> dict:
    created = {}

    departments = [
        await ensure(session, department_service, {"name": data["name"]}, data, created)
        for data in DEPARTMENTS
    ]
    specialties = [
        await ensure(session, specialty_service, {"name": data["name"]}, data, created)
        for data in SPECIALTIES
    ]

    doctors = []
    for first_name, last_name, email, phone, dept_idx, specialty_idx in DOCTORS:
        doctor = await ensure(session, doctor_service, {"email": email}, {
            "first_name": first_name,
            "last_name": last_name,
            "phone": phone,
            "department_id": departments[dept_idx].department_id,
        }, created)
        await ensure(session, doctor_specialty_service, {
            "doctor_id": doctor.doctor_id,
            "specialty_id": specialties[specialty_idx].specialty_id,
        }, {}, created)
        doctors.append(doctor)

    patients = [
        await ensure(session, patient_service, {"email": data["email"]}, data, created)
        for data in PATIENTS
    ]

    await ensure(session, appointment_service, {
        "patient_id": patients[0].patient_id,
        "doctor_id": doctors[0].doctor_id,
        "appointment_datetime": datetime(2025, 9, 20, 10, 0, 0),
    }, {"reason": "Regular check-up"}, created)

    for data in TREATMENTS:
        await ensure(session, treatment_service, {"code": data["code"]}, data, created)

    if not created:
        return {"status": "skipped", "message": "sample data already present"}

    return {
        "status": "seeded",
        "departments": created.get("departments", 0),
        "specialties": created.get("specialties", 0),
        "doctors": created.get("doctors", 0),
        "patients": created.get("patients", 0),
        "appointments": created.get("appointments", 0),
        "treatments": created.get("treatments", 0),
    }


async def async_main(args: argparse.Namespace):
    await init_models(engine, drop=args.reset)
    async with AsyncSessionLocal() as session:
        summary = await seed(session)
    await engine.dispose()
    print(summary)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Insert the sample clinic data set.")
    p.add_argument("--reset", action="store_true", help="Drop and recreate all tables first")
    return p


def main():
    args = build_parser().parse_args()
    asyncio.run(async_main(args))


if __name__ == "__main__":
    main()
