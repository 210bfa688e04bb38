"""表结构与原 MySQL 库保持一致: 表名、列、默认值、枚举、外键动作、索引"""

from clinic.db.base import Base
from clinic.models import (
    Appointment, AppointmentStatus, Doctor, Gender, Medication, Patient,
    Payment, PaymentMethod, Treatment, User, UserRole,
)


def _ondelete_actions():
    actions = {}
    for table in Base.metadata.sorted_tables:
        for fk in table.foreign_keys:
            actions[(table.name, fk.parent.name)] = (fk.column.table.name, fk.ondelete)
    return actions


def test_all_tables_registered():
    assert set(Base.metadata.tables) == {
        "departments", "specialties", "doctors", "doctor_specialties", "patients",
        "appointments", "treatments", "prescriptions", "medications",
        "prescription_items", "appointment_treatments", "payments", "users",
    }


def test_foreign_key_delete_actions():
    assert _ondelete_actions() == {
        ("doctors", "department_id"): ("departments", "SET NULL"),
        ("doctor_specialties", "doctor_id"): ("doctors", "CASCADE"),
        ("doctor_specialties", "specialty_id"): ("specialties", "CASCADE"),
        ("appointments", "patient_id"): ("patients", "CASCADE"),
        ("appointments", "doctor_id"): ("doctors", "RESTRICT"),
        ("prescriptions", "appointment_id"): ("appointments", "CASCADE"),
        ("prescription_items", "prescription_id"): ("prescriptions", "CASCADE"),
        ("prescription_items", "medication_id"): ("medications", "RESTRICT"),
        ("appointment_treatments", "appointment_id"): ("appointments", "CASCADE"),
        ("appointment_treatments", "treatment_id"): ("treatments", "RESTRICT"),
        ("payments", "appointment_id"): ("appointments", "CASCADE"),
    }


def test_join_tables_use_composite_primary_keys():
    tables = Base.metadata.tables
    assert [c.name for c in tables["doctor_specialties"].primary_key] == ["doctor_id", "specialty_id"]
    assert [c.name for c in tables["appointment_treatments"].primary_key] == ["appointment_id", "treatment_id"]
    assert [c.name for c in tables["prescription_items"].primary_key] == ["prescription_id", "medication_id"]


def test_enums_are_closed_sets_stored_by_value():
    assert Appointment.__table__.c.status.type.enums == ["Scheduled", "Completed", "Cancelled", "No-Show"]
    assert Patient.__table__.c.gender.type.enums == ["Male", "Female", "Other"]
    assert Payment.__table__.c.method.type.enums == ["Cash", "Card", "Mobile Money", "Insurance"]
    assert User.__table__.c.role.type.enums == ["Admin", "Doctor", "Reception", "Pharmacist"]
    assert AppointmentStatus("No-Show") is AppointmentStatus.NO_SHOW
    assert PaymentMethod("Mobile Money") is PaymentMethod.MOBILE_MONEY
    assert Gender("Other") is Gender.OTHER
    assert UserRole("Pharmacist") is UserRole.PHARMACIST


def test_column_defaults():
    appointments = Appointment.__table__.c
    assert appointments.duration_minutes.server_default.arg == "30"
    assert appointments.status.server_default.arg == "Scheduled"
    assert User.__table__.c.role.server_default.arg == "Reception"
    assert Treatment.__table__.c.price.type.precision == 10
    assert Treatment.__table__.c.price.type.scale == 2
    assert Doctor.__table__.c.department_id.nullable
    assert not Doctor.__table__.c.email.nullable


def test_unique_constraints_and_indexes():
    assert Doctor.__table__.c.email.unique
    assert Treatment.__table__.c.code.unique
    assert User.__table__.c.username.unique

    patient_uniques = {c.name for c in Patient.__table__.constraints if c.name}
    assert "uq_patient_email" in patient_uniques
    medication_uniques = {c.name for c in Medication.__table__.constraints if c.name}
    assert "uq_medication_name_brand" in medication_uniques

    assert {i.name for i in Appointment.__table__.indexes} >= {
        "idx_appointments_patient",
        "idx_appointments_doctor",
        "idx_appointments_datetime",
    }
