from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from clinic.core.config import settings
from clinic.db.base import get_db
from clinic.models.user import UserRole
from clinic.schemas.user import UserCreate, UserUpdate, UserResponse
from clinic.schemas.response import ResponseModel, DeleteResponse
from clinic.services.user_service import user_service


router = APIRouter()


@router.post("", response_model=ResponseModel[UserResponse])
async def create_user(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """创建员工账号, 密码以hash保存, 响应中不返回"""
    user = await user_service.create(db, user_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=UserResponse.model_validate(user))


@router.get("", response_model=ResponseModel[List[UserResponse]])
async def list_users(
    role: Optional[UserRole] = Query(None, description="按角色过滤"),
    is_active: Optional[bool] = Query(None, description="按账号状态过滤"),
    db: AsyncSession = Depends(get_db)
):
    users = [UserResponse.model_validate(u) async for u in user_service.list(db, role=role, is_active=is_active)]
    return ResponseModel(code=settings.SUCCESS_CODE, message=users)


@router.get("/{user_id}", response_model=ResponseModel[UserResponse])
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    user = await user_service.get(db, user_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=UserResponse.model_validate(user))


@router.put("/{user_id}", response_model=ResponseModel[UserResponse])
async def update_user(user_id: int, user_data: UserUpdate, db: AsyncSession = Depends(get_db)):
    user = await user_service.update(db, user_id, data=user_data)
    return ResponseModel(code=settings.SUCCESS_CODE, message=UserResponse.model_validate(user))


@router.delete("/{user_id}", response_model=ResponseModel[DeleteResponse])
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)):
    await user_service.delete(db, user_id)
    return ResponseModel(code=settings.SUCCESS_CODE, message=DeleteResponse(detail="账号已删除"))
