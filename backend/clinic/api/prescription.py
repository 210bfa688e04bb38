from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from clinic.core.config import settings
from clinic.db.base import get_db
from clinic.schemas.appointment import (
    PrescriptionUpdate, PrescriptionResponse,
    PrescriptionItemAdd, PrescriptionItemUpdate, PrescriptionItemResponse,
)
from clinic.schemas.response import ResponseModel, DeleteResponse
from clinic.services.appointment_service import prescription_service, prescription_item_service


router = APIRouter()


@router.get("/{prescription_id}", response_model=ResponseModel[PrescriptionResponse])
async def get_prescription(prescription_id: int, db: AsyncSession = Depends(get_db)):
    prescription = await prescription_service.get(db, prescription_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=PrescriptionResponse.model_validate(prescription))


@router.put("/{prescription_id}", response_model=ResponseModel[PrescriptionResponse])
async def update_prescription(prescription_id: int, prescription_data: PrescriptionUpdate, db: AsyncSession = Depends(get_db)):
    prescription = await prescription_service.update(db, prescription_id, data=prescription_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=PrescriptionResponse.model_validate(prescription))


@router.delete("/{prescription_id}", response_model=ResponseModel[DeleteResponse])
async def delete_prescription(prescription_id: int, db: AsyncSession = Depends(get_db)):
    """删除处方及其明细"""
    await prescription_service.delete(db, prescription_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="处方已删除"))


# ====== 处方明细 ======

@router.post("/{prescription_id}/items", response_model=ResponseModel[PrescriptionItemResponse])
async def add_prescription_item(prescription_id: int, item_data: PrescriptionItemAdd, db: AsyncSession = Depends(get_db)):
    item = await prescription_item_service.create(db, {"prescription_id": prescription_id, **item_data.model_dump()})
    return ResponseModel(code=settings.SUCCESS_CODE, message=PrescriptionItemResponse.model_validate(item))


@router.get("/{prescription_id}/items", response_model=ResponseModel[List[PrescriptionItemResponse]])
async def list_prescription_items(prescription_id: int, db: AsyncSession = Depends(get_db)):
    await prescription_service.get(db, prescription_id)
    stream = prescription_item_service.list(db, prescription_id=prescription_id)
    items = [PrescriptionItemResponse.model_validate(i) async for i in stream]
    return ResponseModel(code=settings.SUCCESS_CODE, message=items)


@router.put("/{prescription_id}/items/{medication_id}", response_model=ResponseModel[PrescriptionItemResponse])
async def update_prescription_item(
    prescription_id: int,
    medication_id: int,
    item_data: PrescriptionItemUpdate,
    db: AsyncSession = Depends(get_db)
):
    item = await prescription_item_service.update(db, prescription_id, medication_id, data=item_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=PrescriptionItemResponse.model_validate(item))


@router.delete("/{prescription_id}/items/{medication_id}", response_model=ResponseModel[DeleteResponse])
async def remove_prescription_item(prescription_id: int, medication_id: int, db: AsyncSession = Depends(get_db)):
    await prescription_item_service.delete(db, prescription_id, medication_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="处方明细已移除"))
