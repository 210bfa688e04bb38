from datetime import datetime

import pytest
from sqlalchemy import select

from clinic.core.exception_handler import NotFound, ConstraintViolation
from clinic.models.department import Department
from clinic.models.patient import Gender
from clinic.schemas.catalog import DepartmentCreate, DepartmentUpdate
from clinic.services.catalog_service import department_service, medication_service
from clinic.services.crud_service import RowStream
from clinic.services.doctor_service import doctor_service
from clinic.services.patient_service import patient_service
from clinic.services.appointment_service import appointment_service


async def test_create_assigns_identity_and_timestamp(db):
    dept = await department_service.create(db, DepartmentCreate(name="Cardiology", description="Heart"))

    assert dept.department_id is not None
    assert isinstance(dept.created_at, datetime)
    assert dept.name == "Cardiology"


async def test_get_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        await department_service.get(db, 404)


async def test_update_is_partial(db, make_department):
    dept = await make_department(name="Cardiology", description="Heart")
    dept_id = dept.department_id

    updated = await department_service.update(db, dept_id, data=DepartmentUpdate(description="Heart and vessels"))

    assert updated.name == "Cardiology"
    assert updated.description == "Heart and vessels"


async def test_update_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        await department_service.update(db, 404, data={"name": "Nowhere"})


async def test_update_to_duplicate_name_is_rejected(db, make_department):
    await make_department(name="Cardiology")
    other = await make_department(name="Dermatology")
    other_id = other.department_id

    with pytest.raises(ConstraintViolation):
        await department_service.update(db, other_id, data={"name": "Cardiology"})

    assert (await department_service.get(db, other_id)).name == "Dermatology"


async def test_update_keeping_own_unique_value_is_allowed(db, make_department):
    dept = await make_department(name="Cardiology")

    updated = await department_service.update(db, dept.department_id, data={"name": "Cardiology"})

    assert updated.name == "Cardiology"


async def test_setting_required_field_to_null_is_rejected(db, make_doctor):
    doctor = await make_doctor()

    with pytest.raises(ConstraintViolation):
        await doctor_service.update(db, doctor.doctor_id, data={"first_name": None})


async def test_missing_required_field_is_rejected(db):
    with pytest.raises(ConstraintViolation):
        await doctor_service.create(db, {"first_name": "Amina"})


async def test_value_outside_enum_is_rejected(db):
    with pytest.raises(ConstraintViolation):
        await patient_service.create(db, {"first_name": "A", "last_name": "B", "gender": "Unknown"})

    patient = await patient_service.create(db, {"first_name": "A", "last_name": "B", "gender": "Other"})
    assert patient.gender is Gender.OTHER


async def test_delete_missing_raises_not_found(db):
    with pytest.raises(NotFound):
        await department_service.delete(db, 404)


async def test_delete_then_get_raises_not_found(db, make_department):
    dept = await make_department()
    dept_id = dept.department_id

    await department_service.delete(db, dept_id)

    with pytest.raises(NotFound):
        await department_service.get(db, dept_id)


async def test_patient_email_is_unique_only_when_present(db, make_patient):
    await make_patient(email=None)
    await make_patient(email=None)
    await make_patient(email="dami@example.com")

    with pytest.raises(ConstraintViolation):
        await make_patient(email="dami@example.com")


async def test_email_is_stored_exactly_as_given(db, make_doctor, make_patient):
    doctor = await make_doctor(email="Amina@Clinic.COM")
    patient = await make_patient(email="front.desk@clinic.local")
    doctor_id, patient_id = doctor.doctor_id, patient.patient_id

    assert (await doctor_service.get(db, doctor_id)).email == "Amina@Clinic.COM"
    assert (await patient_service.get(db, patient_id)).email == "front.desk@clinic.local"

    updated = await patient_service.update(db, patient_id, data={"email": "Dami@Example.ORG"})
    assert updated.email == "Dami@Example.ORG"


async def test_update_with_unknown_reference_is_rejected(db, make_appointment):
    appointment = await make_appointment()
    appointment_id, doctor_id = appointment.appointment_id, appointment.doctor_id

    with pytest.raises(ConstraintViolation):
        await appointment_service.update(db, appointment_id, data={"doctor_id": 999})

    assert (await appointment_service.get(db, appointment_id)).doctor_id == doctor_id


async def test_treatment_code_is_unique(db, make_treatment):
    await make_treatment(code="T001", name="General Consultation")

    with pytest.raises(ConstraintViolation):
        await make_treatment(code="T001", name="Blood Test")

    other = await make_treatment(code="T002", name="Blood Test")
    assert other.code == "T002"


async def test_medication_unique_on_name_and_brand(db, make_medication):
    await make_medication(name="Paracetamol", brand="Emzor")
    await make_medication(name="Paracetamol", brand="Panadol")

    with pytest.raises(ConstraintViolation):
        await make_medication(name="Paracetamol", brand="Emzor")


async def test_list_is_lazy_and_restartable(db, make_department):
    await make_department(name="Cardiology")
    stream = department_service.list(db)

    # 创建 stream 之后插入的数据也能被遍历到
    await make_department(name="Dermatology")

    first = [d.name async for d in stream]
    second = await stream.all()

    assert first == ["Cardiology", "Dermatology"]
    assert [d.name for d in second] == first


async def test_row_stream_fetches_in_pages(db, make_department):
    names = [f"Dept {i}" for i in range(5)]
    for name in names:
        await make_department(name=name)

    stream = RowStream(db, select(Department).order_by(Department.department_id), page_size=2)

    assert [d.name async for d in stream] == names


async def test_list_rejects_unknown_filter(db):
    with pytest.raises(TypeError):
        department_service.list(db, colour="blue")


async def test_list_ignores_none_filters(db, make_doctor):
    await make_doctor()
    await make_doctor(is_active=False)

    assert len(await doctor_service.list(db, department_id=None, is_active=None).all()) == 2
    assert len(await doctor_service.list(db, is_active=False).all()) == 1


async def test_update_with_empty_payload_returns_row_unchanged(db, make_medication):
    medication = await make_medication()

    same = await medication_service.update(db, medication.medication_id, data={})

    assert same.name == "Paracetamol"
