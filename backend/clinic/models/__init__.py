# 导入所有模型，确保SQLAlchemy能够正确识别它们
from .department import Department
from .specialty import Specialty
from .doctor import Doctor
from .doctor_specialty import DoctorSpecialty
from .patient import Patient, Gender
from .appointment import Appointment, AppointmentStatus
from .treatment import Treatment
from .appointment_treatment import AppointmentTreatment
from .prescription import Prescription
from .medication import Medication
from .prescription_item import PrescriptionItem
from .payment import Payment, PaymentMethod
from .user import User, UserRole

__all__ = [
    "Department",
    "Specialty",
    "Doctor",
    "DoctorSpecialty",
    "Patient",
    "Gender",
    "Appointment",
    "AppointmentStatus",
    "Treatment",
    "AppointmentTreatment",
    "Prescription",
    "Medication",
    "PrescriptionItem",
    "Payment",
    "PaymentMethod",
    "User",
    "UserRole"
]
