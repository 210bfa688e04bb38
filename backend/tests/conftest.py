import os
import tempfile

# 在导入 clinic 之前设置, 避免测试写入项目目录
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="clinic-logs-"))

from datetime import datetime
from decimal import Decimal

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.pool import StaticPool

from clinic.db.base import build_engine, build_sessionmaker, get_db, init_models
from clinic.main import app
from clinic.services.catalog_service import department_service, specialty_service, treatment_service, medication_service
from clinic.services.doctor_service import doctor_service
from clinic.services.patient_service import patient_service
from clinic.services.appointment_service import appointment_service


@pytest.fixture
async def engine():
    test_engine = build_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await init_models(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db(engine):
    session_factory = build_sessionmaker(engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(engine):
    session_factory = build_sessionmaker(engine)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ====== 测试数据工厂 ======

@pytest.fixture
def make_department(db):
    async def _make(name="Pediatrics", **overrides):
        return await department_service.create(db, {"name": name, **overrides})
    return _make


@pytest.fixture
def make_doctor(db):
    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        data = {
            "first_name": "Chinedu",
            "last_name": "Okeke",
            "email": f"doctor{counter['n']}@example.com",
        }
        data.update(overrides)
        return await doctor_service.create(db, data)
    return _make


@pytest.fixture
def make_patient(db):
    async def _make(**overrides):
        data = {"first_name": "Damilola", "last_name": "Adebisi"}
        data.update(overrides)
        return await patient_service.create(db, data)
    return _make


@pytest.fixture
def make_appointment(db, make_patient, make_doctor):
    async def _make(patient_id=None, doctor_id=None, **overrides):
        if patient_id is None:
            patient_id = (await make_patient()).patient_id
        if doctor_id is None:
            doctor_id = (await make_doctor()).doctor_id
        data = {
            "patient_id": patient_id,
            "doctor_id": doctor_id,
            "appointment_datetime": datetime(2025, 9, 20, 10, 0, 0),
        }
        data.update(overrides)
        return await appointment_service.create(db, data)
    return _make


@pytest.fixture
def make_specialty(db):
    async def _make(name="General Practice", **overrides):
        return await specialty_service.create(db, {"name": name, **overrides})
    return _make


@pytest.fixture
def make_treatment(db):
    async def _make(code="T001", name="General Consultation", price=Decimal("1500.00"), **overrides):
        return await treatment_service.create(db, {"code": code, "name": name, "price": price, **overrides})
    return _make


@pytest.fixture
def make_medication(db):
    async def _make(name="Paracetamol", brand="Emzor", **overrides):
        return await medication_service.create(db, {"name": name, "brand": brand, **overrides})
    return _make
