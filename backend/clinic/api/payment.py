from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.core.config import settings
from clinic.db.base import get_db
from clinic.schemas.appointment import PaymentUpdate, PaymentResponse
from clinic.schemas.response import ResponseModel, DeleteResponse
from clinic.services.appointment_service import payment_service


router = APIRouter()


@router.get("/{payment_id}", response_model=ResponseModel[PaymentResponse])
async def get_payment(payment_id: int, db: AsyncSession = Depends(get_db)):
    payment = await payment_service.get(db, payment_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=PaymentResponse.model_validate(payment))


@router.put("/{payment_id}", response_model=ResponseModel[PaymentResponse])
async def update_payment(payment_id: int, payment_data: PaymentUpdate, db: AsyncSession = Depends(get_db)):
    payment = await payment_service.update(db, payment_id, data=payment_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=PaymentResponse.model_validate(payment))


@router.delete("/{payment_id}", response_model=ResponseModel[DeleteResponse])
async def delete_payment(payment_id: int, db: AsyncSession = Depends(get_db)):
    await payment_service.delete(db, payment_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="付款记录已删除"))
