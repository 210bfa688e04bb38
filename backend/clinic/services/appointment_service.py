"""
预约及其下属记录的数据访问服务

预约列表支持按患者、医生、状态、就诊时间区间过滤
(对应 idx_appointments_patient / idx_appointments_doctor / idx_appointments_datetime 索引)
"""

from clinic.models.appointment import Appointment
from clinic.models.appointment_treatment import AppointmentTreatment
from clinic.models.prescription import Prescription
from clinic.models.prescription_item import PrescriptionItem
from clinic.models.payment import Payment
from clinic.schemas.appointment import (
    AppointmentCreate, AppointmentUpdate,
    AppointmentTreatmentCreate, AppointmentTreatmentUpdate,
    PrescriptionCreate, PrescriptionUpdate,
    PrescriptionItemCreate, PrescriptionItemUpdate,
    PaymentCreate, PaymentUpdate,
)
from clinic.services.crud_service import CrudService


appointment_service = CrudService(
    Appointment,
    AppointmentCreate,
    AppointmentUpdate,
    filters={
        # 时间区间为闭区间
        "start": lambda value: Appointment.appointment_datetime >= value,
        "end": lambda value: Appointment.appointment_datetime <= value,
    },
    order_by=[Appointment.appointment_datetime, Appointment.appointment_id],
)

appointment_treatment_service = CrudService(AppointmentTreatment, AppointmentTreatmentCreate, AppointmentTreatmentUpdate)

prescription_service = CrudService(Prescription, PrescriptionCreate, PrescriptionUpdate)

prescription_item_service = CrudService(PrescriptionItem, PrescriptionItemCreate, PrescriptionItemUpdate)

payment_service = CrudService(
    Payment,
    PaymentCreate,
    PaymentUpdate,
    order_by=[Payment.paid_at, Payment.payment_id],
)
