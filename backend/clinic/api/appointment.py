from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from datetime import datetime

from clinic.core.config import settings
from clinic.db.base import get_db
from clinic.models.appointment import AppointmentStatus
from clinic.schemas.appointment import (
    AppointmentCreate, AppointmentUpdate, AppointmentResponse,
    AppointmentTreatmentAdd, AppointmentTreatmentUpdate, AppointmentTreatmentResponse,
    PrescriptionAdd, PrescriptionResponse,
    PaymentAdd, PaymentResponse,
)
from clinic.schemas.response import ResponseModel, DeleteResponse
from clinic.services.appointment_service import (
    appointment_service,
    appointment_treatment_service,
    prescription_service,
    payment_service,
)


router = APIRouter()


# ====== 预约 ======

@router.post("", response_model=ResponseModel[AppointmentResponse])
async def create_appointment(appointment_data: AppointmentCreate, db: AsyncSession = Depends(get_db)):
    """创建预约, 患者或医生不存在时返回约束冲突

    不做时间冲突检测, 同一医生同一时间可以有多个预约
    """
    appointment = await appointment_service.create(db, appointment_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=AppointmentResponse.model_validate(appointment))


@router.get("", response_model=ResponseModel[List[AppointmentResponse]])
async def list_appointments(
    patient_id: Optional[int] = Query(None, description="按患者过滤"),
    doctor_id: Optional[int] = Query(None, description="按医生过滤"),
    status: Optional[AppointmentStatus] = Query(None, description="按预约状态过滤"),
    start: Optional[datetime] = Query(None, description="就诊时间下限(含)"),
    end: Optional[datetime] = Query(None, description="就诊时间上限(含)"),
    db: AsyncSession = Depends(get_db)
):
    stream = appointment_service.list(
        db, patient_id=patient_id, doctor_id=doctor_id, status=status, start=start, end=end
    )
    appointments = [AppointmentResponse.model_validate(a) async for a in stream]
    return ResponseModel(code=settings.SUCCESS_CODE, message=appointments)


@router.get("/{appointment_id}", response_model=ResponseModel[AppointmentResponse])
async def get_appointment(appointment_id: int, db: AsyncSession = Depends(get_db)):
    appointment = await appointment_service.get(db, appointment_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=AppointmentResponse.model_validate(appointment))


@router.put("/{appointment_id}", response_model=ResponseModel[AppointmentResponse])
async def update_appointment(appointment_id: int, appointment_data: AppointmentUpdate, db: AsyncSession = Depends(get_db)):
    appointment = await appointment_service.update(db, appointment_id, data=appointment_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=AppointmentResponse.model_validate(appointment))


@router.delete("/{appointment_id}", response_model=ResponseModel[DeleteResponse])
async def delete_appointment(appointment_id: int, db: AsyncSession = Depends(get_db)):
    """删除预约及其处方、诊疗项目、付款"""
    await appointment_service.delete(db, appointment_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="预约已删除"))


# ====== 预约诊疗项目 ======

@router.post("/{appointment_id}/treatments", response_model=ResponseModel[AppointmentTreatmentResponse])
async def add_appointment_treatment(
    appointment_id: int,
    treatment_data: AppointmentTreatmentAdd,
    db: AsyncSession = Depends(get_db)
):
    link = await appointment_treatment_service.create(
        db, {"appointment_id": appointment_id, **treatment_data.model_dump()}
    )
    return ResponseModel(code=settings.SUCCESS_CODE, message=AppointmentTreatmentResponse.model_validate(link))


@router.get("/{appointment_id}/treatments", response_model=ResponseModel[List[AppointmentTreatmentResponse]])
async def list_appointment_treatments(appointment_id: int, db: AsyncSession = Depends(get_db)):
    await appointment_service.get(db, appointment_id)
    stream = appointment_treatment_service.list(db, appointment_id=appointment_id)
    links = [AppointmentTreatmentResponse.model_validate(link) async for link in stream]
    return ResponseModel(code=settings.SUCCESS_CODE, message=links)


@router.put("/{appointment_id}/treatments/{treatment_id}", response_model=ResponseModel[AppointmentTreatmentResponse])
async def update_appointment_treatment(
    appointment_id: int,
    treatment_id: int,
    treatment_data: AppointmentTreatmentUpdate,
    db: AsyncSession = Depends(get_db)
):
    link = await appointment_treatment_service.update(db, appointment_id, treatment_id, data=treatment_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=AppointmentTreatmentResponse.model_validate(link))


@router.delete("/{appointment_id}/treatments/{treatment_id}", response_model=ResponseModel[DeleteResponse])
async def remove_appointment_treatment(appointment_id: int, treatment_id: int, db: AsyncSession = Depends(get_db)):
    await appointment_treatment_service.delete(db, appointment_id, treatment_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="诊疗项目已移除"))


# ====== 预约下的处方与付款 ======

@router.post("/{appointment_id}/prescriptions", response_model=ResponseModel[PrescriptionResponse])
async def create_prescription(appointment_id: int, prescription_data: PrescriptionAdd, db: AsyncSession = Depends(get_db)):
    prescription = await prescription_service.create(
        db, {"appointment_id": appointment_id, **prescription_data.model_dump()}
    )
    return ResponseModel(code=settings.SUCCESS_CODE, message=PrescriptionResponse.model_validate(prescription))


@router.get("/{appointment_id}/prescriptions", response_model=ResponseModel[List[PrescriptionResponse]])
async def list_prescriptions(appointment_id: int, db: AsyncSession = Depends(get_db)):
    await appointment_service.get(db, appointment_id)
    stream = prescription_service.list(db, appointment_id=appointment_id)
    prescriptions = [PrescriptionResponse.model_validate(p) async for p in stream]
    return ResponseModel(code=settings.SUCCESS_CODE, message=prescriptions)


@router.post("/{appointment_id}/payments", response_model=ResponseModel[PaymentResponse])
async def create_payment(appointment_id: int, payment_data: PaymentAdd, db: AsyncSession = Depends(get_db)):
    """登记付款, 不与诊疗项目金额做核对"""
    payment = await payment_service.create(db, {"appointment_id": appointment_id, **payment_data.model_dump()})
    return ResponseModel(code=settings.SUCCESS_CODE, message=PaymentResponse.model_validate(payment))


@router.get("/{appointment_id}/payments", response_model=ResponseModel[List[PaymentResponse]])
async def list_payments(appointment_id: int, db: AsyncSession = Depends(get_db)):
    await appointment_service.get(db, appointment_id)
    payments = [PaymentResponse.model_validate(p) async for p in payment_service.list(db, appointment_id=appointment_id)]
    return ResponseModel(code=settings.SUCCESS_CODE, message=payments)
