from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from clinic.core.config import settings
from clinic.db.base import get_db
from clinic.schemas.catalog import (
    DepartmentCreate, DepartmentUpdate, DepartmentResponse,
    SpecialtyCreate, SpecialtyUpdate, SpecialtyResponse,
    TreatmentCreate, TreatmentUpdate, TreatmentResponse,
    MedicationCreate, MedicationUpdate, MedicationResponse,
)
from clinic.schemas.response import ResponseModel, DeleteResponse
from clinic.services.catalog_service import department_service, specialty_service, treatment_service, medication_service


router = APIRouter()


# ====== 科室 ======

@router.post("/departments", response_model=ResponseModel[DepartmentResponse])
async def create_department(dept_data: DepartmentCreate, db: AsyncSession = Depends(get_db)):
    """创建科室"""
    dept = await department_service.create(db, dept_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DepartmentResponse.model_validate(dept))


@router.get("/departments", response_model=ResponseModel[List[DepartmentResponse]])
async def list_departments(db: AsyncSession = Depends(get_db)):
    departments = [DepartmentResponse.model_validate(d) async for d in department_service.list(db)]
    return ResponseModel(code=settings.SUCCESS_CODE, message=departments)


@router.get("/departments/{department_id}", response_model=ResponseModel[DepartmentResponse])
async def get_department(department_id: int, db: AsyncSession = Depends(get_db)):
    dept = await department_service.get(db, department_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DepartmentResponse.model_validate(dept))


@router.put("/departments/{department_id}", response_model=ResponseModel[DepartmentResponse])
async def update_department(department_id: int, dept_data: DepartmentUpdate, db: AsyncSession = Depends(get_db)):
    dept = await department_service.update(db, department_id, data=dept_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DepartmentResponse.model_validate(dept))


@router.delete("/departments/{department_id}", response_model=ResponseModel[DeleteResponse])
async def delete_department(department_id: int, db: AsyncSession = Depends(get_db)):
    """删除科室, 该科室医生的 department_id 置空"""
    await department_service.delete(db, department_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="科室已删除"))


# ====== 专长 ======

@router.post("/specialties", response_model=ResponseModel[SpecialtyResponse])
async def create_specialty(specialty_data: SpecialtyCreate, db: AsyncSession = Depends(get_db)):
    specialty = await specialty_service.create(db, specialty_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=SpecialtyResponse.model_validate(specialty))


@router.get("/specialties", response_model=ResponseModel[List[SpecialtyResponse]])
async def list_specialties(db: AsyncSession = Depends(get_db)):
    specialties = [SpecialtyResponse.model_validate(s) async for s in specialty_service.list(db)]
    return ResponseModel(code=settings.SUCCESS_CODE, message=specialties)


@router.get("/specialties/{specialty_id}", response_model=ResponseModel[SpecialtyResponse])
async def get_specialty(specialty_id: int, db: AsyncSession = Depends(get_db)):
    specialty = await specialty_service.get(db, specialty_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=SpecialtyResponse.model_validate(specialty))


@router.put("/specialties/{specialty_id}", response_model=ResponseModel[SpecialtyResponse])
async def update_specialty(specialty_id: int, specialty_data: SpecialtyUpdate, db: AsyncSession = Depends(get_db)):
    specialty = await specialty_service.update(db, specialty_id, data=specialty_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=SpecialtyResponse.model_validate(specialty))


@router.delete("/specialties/{specialty_id}", response_model=ResponseModel[DeleteResponse])
async def delete_specialty(specialty_id: int, db: AsyncSession = Depends(get_db)):
    await specialty_service.delete(db, specialty_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="专长已删除"))


# ====== 诊疗项目 ======

@router.post("/treatments", response_model=ResponseModel[TreatmentResponse])
async def create_treatment(treatment_data: TreatmentCreate, db: AsyncSession = Depends(get_db)):
    treatment = await treatment_service.create(db, treatment_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=TreatmentResponse.model_validate(treatment))


@router.get("/treatments", response_model=ResponseModel[List[TreatmentResponse]])
async def list_treatments(db: AsyncSession = Depends(get_db)):
    treatments = [TreatmentResponse.model_validate(t) async for t in treatment_service.list(db)]
    return ResponseModel(code=settings.SUCCESS_CODE, message=treatments)


@router.get("/treatments/{treatment_id}", response_model=ResponseModel[TreatmentResponse])
async def get_treatment(treatment_id: int, db: AsyncSession = Depends(get_db)):
    treatment = await treatment_service.get(db, treatment_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=TreatmentResponse.model_validate(treatment))


@router.put("/treatments/{treatment_id}", response_model=ResponseModel[TreatmentResponse])
async def update_treatment(treatment_id: int, treatment_data: TreatmentUpdate, db: AsyncSession = Depends(get_db)):
    treatment = await treatment_service.update(db, treatment_id, data=treatment_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=TreatmentResponse.model_validate(treatment))


@router.delete("/treatments/{treatment_id}", response_model=ResponseModel[DeleteResponse])
async def delete_treatment(treatment_id: int, db: AsyncSession = Depends(get_db)):
    """删除诊疗项目, 已被预约使用时拒绝"""
    await treatment_service.delete(db, treatment_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="诊疗项目已删除"))


# ====== 药品 ======

@router.post("/medications", response_model=ResponseModel[MedicationResponse])
async def create_medication(medication_data: MedicationCreate, db: AsyncSession = Depends(get_db)):
    medication = await medication_service.create(db, medication_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=MedicationResponse.model_validate(medication))


@router.get("/medications", response_model=ResponseModel[List[MedicationResponse]])
async def list_medications(db: AsyncSession = Depends(get_db)):
    medications = [MedicationResponse.model_validate(m) async for m in medication_service.list(db)]
    return ResponseModel(code=settings.SUCCESS_CODE, message=medications)


@router.get("/medications/{medication_id}", response_model=ResponseModel[MedicationResponse])
async def get_medication(medication_id: int, db: AsyncSession = Depends(get_db)):
    medication = await medication_service.get(db, medication_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=MedicationResponse.model_validate(medication))


@router.put("/medications/{medication_id}", response_model=ResponseModel[MedicationResponse])
async def update_medication(medication_id: int, medication_data: MedicationUpdate, db: AsyncSession = Depends(get_db)):
    medication = await medication_service.update(db, medication_id, data=medication_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=MedicationResponse.model_validate(medication))


@router.delete("/medications/{medication_id}", response_model=ResponseModel[DeleteResponse])
async def delete_medication(medication_id: int, db: AsyncSession = Depends(get_db)):
    """删除药品, 已被处方引用时拒绝"""
    await medication_service.delete(db, medication_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="药品已删除"))
