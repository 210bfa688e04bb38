from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from clinic.models.user import UserRole


# 员工账号创建: 明文密码只在请求中出现, 入库前转为hash
class UserCreate(BaseModel):
    username: str = Field(max_length=80, description="登录名（必填）")
    password: str = Field(min_length=1, max_length=72, description="密码（必填）")
    full_name: Optional[str] = Field(None, max_length=150, description="姓名（可选）")
    role: UserRole = Field(UserRole.RECEPTION, description="Admin/Doctor/Reception/Pharmacist")
    is_active: bool = Field(True, description="账号是否有效")


class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, max_length=80, description="登录名")
    password: Optional[str] = Field(None, min_length=1, max_length=72, description="新密码")
    full_name: Optional[str] = Field(None, max_length=150, description="姓名")
    role: Optional[UserRole] = Field(None, description="员工角色")
    is_active: Optional[bool] = Field(None, description="账号是否有效")


class UserResponse(BaseModel):
    user_id: int
    username: str
    full_name: Optional[str] = None
    role: UserRole
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
