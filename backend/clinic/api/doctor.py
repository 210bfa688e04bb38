from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from clinic.core.config import settings
from clinic.db.base import get_db
from clinic.schemas.doctor import DoctorCreate, DoctorUpdate, DoctorResponse, DoctorSpecialtyAdd, DoctorSpecialtyResponse
from clinic.schemas.response import ResponseModel, DeleteResponse
from clinic.services.doctor_service import doctor_service, doctor_specialty_service


router = APIRouter()


@router.post("", response_model=ResponseModel[DoctorResponse])
async def create_doctor(doctor_data: DoctorCreate, db: AsyncSession = Depends(get_db)):
    """创建医生, 邮箱重复或科室不存在时返回约束冲突"""
    doctor = await doctor_service.create(db, doctor_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DoctorResponse.model_validate(doctor))


@router.get("", response_model=ResponseModel[List[DoctorResponse]])
async def list_doctors(
    department_id: Optional[int] = Query(None, description="按科室过滤"),
    is_active: Optional[bool] = Query(None, description="按在职状态过滤"),
    db: AsyncSession = Depends(get_db)
):
    stream = doctor_service.list(db, department_id=department_id, is_active=is_active)
    doctors = [DoctorResponse.model_validate(d) async for d in stream]
    return ResponseModel(code=settings.SUCCESS_CODE, message=doctors)


@router.get("/{doctor_id}", response_model=ResponseModel[DoctorResponse])
async def get_doctor(doctor_id: int, db: AsyncSession = Depends(get_db)):
    doctor = await doctor_service.get(db, doctor_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DoctorResponse.model_validate(doctor))


@router.put("/{doctor_id}", response_model=ResponseModel[DoctorResponse])
async def update_doctor(doctor_id: int, doctor_data: DoctorUpdate, db: AsyncSession = Depends(get_db)):
    doctor = await doctor_service.update(db, doctor_id, data=doctor_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DoctorResponse.model_validate(doctor))


@router.delete("/{doctor_id}", response_model=ResponseModel[DeleteResponse])
async def delete_doctor(doctor_id: int, db: AsyncSession = Depends(get_db)):
    """删除医生, 仍有预约时拒绝"""
    await doctor_service.delete(db, doctor_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="医生已删除"))


# ====== 医生专长 ======

@router.post("/{doctor_id}/specialties", response_model=ResponseModel[DoctorSpecialtyResponse])
async def add_doctor_specialty(doctor_id: int, link_data: DoctorSpecialtyAdd, db: AsyncSession = Depends(get_db)):
    link = await doctor_specialty_service.create(db, {"doctor_id": doctor_id, **link_data.model_dump()})
    return ResponseModel(code=settings.SUCCESS_CODE, message=DoctorSpecialtyResponse.model_validate(link))


@router.get("/{doctor_id}/specialties", response_model=ResponseModel[List[DoctorSpecialtyResponse]])
async def list_doctor_specialties(doctor_id: int, db: AsyncSession = Depends(get_db)):
    await doctor_service.get(db, doctor_id)
    links = [DoctorSpecialtyResponse.model_validate(link) async for link in doctor_specialty_service.list(db, doctor_id=doctor_id)]
    return ResponseModel(code=settings.SUCCESS_CODE, message=links)


@router.delete("/{doctor_id}/specialties/{specialty_id}", response_model=ResponseModel[DeleteResponse])
async def remove_doctor_specialty(doctor_id: int, specialty_id: int, db: AsyncSession = Depends(get_db)):
    await doctor_specialty_service.delete(db, doctor_id, specialty_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="医生专长已移除"))
