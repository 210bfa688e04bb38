"""
预约及其下属记录(诊疗项目、处方、处方明细、付款)的 Pydantic Schema

*Add 为嵌套路由的请求体(父记录ID来自路径), *Create 额外带上父记录ID, 供数据访问层使用
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from clinic.models.appointment import AppointmentStatus
from clinic.models.payment import PaymentMethod


# ====== 预约 ======

class AppointmentCreate(BaseModel):
    patient_id: int = Field(description="患者ID")
    doctor_id: int = Field(description="医生ID")
    appointment_datetime: datetime = Field(description="就诊时间")
    duration_minutes: int = Field(30, description="时长(分钟)")
    status: AppointmentStatus = Field(AppointmentStatus.SCHEDULED, description="Scheduled/Completed/Cancelled/No-Show")
    reason: Optional[str] = Field(None, description="就诊原因")


class AppointmentUpdate(BaseModel):
    patient_id: Optional[int] = Field(None, description="患者ID")
    doctor_id: Optional[int] = Field(None, description="医生ID")
    appointment_datetime: Optional[datetime] = Field(None, description="就诊时间")
    duration_minutes: Optional[int] = Field(None, description="时长(分钟)")
    status: Optional[AppointmentStatus] = Field(None, description="预约状态")
    reason: Optional[str] = Field(None, description="就诊原因")


class AppointmentResponse(BaseModel):
    appointment_id: int
    patient_id: int
    doctor_id: int
    appointment_datetime: datetime
    duration_minutes: int
    status: AppointmentStatus
    reason: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ====== 预约诊疗项目 ======

class AppointmentTreatmentAdd(BaseModel):
    treatment_id: int = Field(description="诊疗项目ID")
    quantity: int = Field(1, description="数量")
    price_at_time: Decimal = Field(Decimal("0.00"), max_digits=10, decimal_places=2, description="当时价格快照")


class AppointmentTreatmentCreate(AppointmentTreatmentAdd):
    appointment_id: int = Field(description="预约ID")


class AppointmentTreatmentUpdate(BaseModel):
    quantity: Optional[int] = Field(None, description="数量")
    price_at_time: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2, description="当时价格快照")


class AppointmentTreatmentResponse(BaseModel):
    appointment_id: int
    treatment_id: int
    quantity: int
    price_at_time: Decimal

    class Config:
        from_attributes = True


# ====== 处方 ======

class PrescriptionAdd(BaseModel):
    notes: Optional[str] = Field(None, description="医嘱备注")


class PrescriptionCreate(PrescriptionAdd):
    appointment_id: int = Field(description="预约ID")


class PrescriptionUpdate(BaseModel):
    notes: Optional[str] = Field(None, description="医嘱备注")


class PrescriptionResponse(BaseModel):
    prescription_id: int
    appointment_id: int
    notes: Optional[str] = None
    issued_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ====== 处方明细 ======

class PrescriptionItemAdd(BaseModel):
    medication_id: int = Field(description="药品ID")
    dosage: Optional[str] = Field(None, max_length=100, description='用量, 如 "1 tablet twice daily"')
    duration_days: Optional[int] = Field(None, description="服用天数")
    instructions: Optional[str] = Field(None, description="服用说明")


class PrescriptionItemCreate(PrescriptionItemAdd):
    prescription_id: int = Field(description="处方ID")


class PrescriptionItemUpdate(BaseModel):
    dosage: Optional[str] = Field(None, max_length=100, description="用量")
    duration_days: Optional[int] = Field(None, description="服用天数")
    instructions: Optional[str] = Field(None, description="服用说明")


class PrescriptionItemResponse(BaseModel):
    prescription_id: int
    medication_id: int
    dosage: Optional[str] = None
    duration_days: Optional[int] = None
    instructions: Optional[str] = None

    class Config:
        from_attributes = True


# ====== 付款 ======

class PaymentAdd(BaseModel):
    amount: Decimal = Field(max_digits=10, decimal_places=2, description="金额")
    method: PaymentMethod = Field(description="Cash/Card/Mobile Money/Insurance")
    reference: Optional[str] = Field(None, max_length=150, description="流水号/凭证号")


class PaymentCreate(PaymentAdd):
    appointment_id: int = Field(description="预约ID")


class PaymentUpdate(BaseModel):
    amount: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2, description="金额")
    method: Optional[PaymentMethod] = Field(None, description="付款方式")
    reference: Optional[str] = Field(None, max_length=150, description="流水号/凭证号")


class PaymentResponse(BaseModel):
    payment_id: int
    appointment_id: int
    amount: Decimal
    method: PaymentMethod
    paid_at: Optional[datetime] = None
    reference: Optional[str] = None

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "payment_id": 1,
                "appointment_id": 1,
                "amount": "1500.00",
                "method": "Cash",
                "paid_at": "2025-09-20T10:45:00",
                "reference": None
            }
        }
