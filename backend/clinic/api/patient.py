from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from clinic.core.config import settings
from clinic.db.base import get_db
from clinic.schemas.patient import PatientCreate, PatientUpdate, PatientResponse
from clinic.schemas.appointment import AppointmentResponse
from clinic.schemas.response import ResponseModel, DeleteResponse
from clinic.services.patient_service import patient_service
from clinic.services.appointment_service import appointment_service
from clinic.models.appointment import AppointmentStatus


router = APIRouter()


@router.post("", response_model=ResponseModel[PatientResponse])
async def create_patient(patient_data: PatientCreate, db: AsyncSession = Depends(get_db)):
    patient = await patient_service.create(db, patient_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=PatientResponse.model_validate(patient))


@router.get("", response_model=ResponseModel[List[PatientResponse]])
async def list_patients(db: AsyncSession = Depends(get_db)):
    patients = [PatientResponse.model_validate(p) async for p in patient_service.list(db)]
    return ResponseModel(code=settings.SUCCESS_CODE, message=patients)


@router.get("/{patient_id}", response_model=ResponseModel[PatientResponse])
async def get_patient(patient_id: int, db: AsyncSession = Depends(get_db)):
    patient = await patient_service.get(db, patient_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=PatientResponse.model_validate(patient))


@router.put("/{patient_id}", response_model=ResponseModel[PatientResponse])
async def update_patient(patient_id: int, patient_data: PatientUpdate, db: AsyncSession = Depends(get_db)):
    patient = await patient_service.update(db, patient_id, data=patient_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=PatientResponse.model_validate(patient))


@router.delete("/{patient_id}", response_model=ResponseModel[DeleteResponse])
async def delete_patient(patient_id: int, db: AsyncSession = Depends(get_db)):
    """删除患者及其全部预约(含处方、诊疗项目、付款)"""
    await patient_service.delete(db, patient_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="患者已删除"))


@router.get("/{patient_id}/appointments", response_model=ResponseModel[List[AppointmentResponse]])
async def list_patient_appointments(
    patient_id: int,
    status: Optional[AppointmentStatus] = Query(None, description="按预约状态过滤"),
    db: AsyncSession = Depends(get_db)
):
    await patient_service.get(db, patient_id)
    stream = appointment_service.list(db, patient_id=patient_id, status=status)
    appointments = [AppointmentResponse.model_validate(a) async for a in stream]
    return ResponseModel(code=settings.SUCCESS_CODE, message=appointments)
