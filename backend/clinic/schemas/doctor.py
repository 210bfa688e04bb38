from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime


# 医生管理
class DoctorCreate(BaseModel):
    first_name: str = Field(max_length=60, description="名")
    last_name: str = Field(max_length=60, description="姓")
    email: str = Field(max_length=150, description="邮箱(唯一)")
    phone: Optional[str] = Field(None, max_length=30, description="电话")
    department_id: Optional[int] = Field(None, description="科室ID")
    hire_date: Optional[date] = Field(None, description="入职日期")
    is_active: bool = Field(True, description="是否在职")


class DoctorUpdate(BaseModel):
    first_name: Optional[str] = Field(None, max_length=60, description="名")
    last_name: Optional[str] = Field(None, max_length=60, description="姓")
    email: Optional[str] = Field(None, max_length=150, description="邮箱")
    phone: Optional[str] = Field(None, max_length=30, description="电话")
    department_id: Optional[int] = Field(None, description="科室ID, 传 null 表示移出科室")
    hire_date: Optional[date] = Field(None, description="入职日期")
    is_active: Optional[bool] = Field(None, description="是否在职")


class DoctorResponse(BaseModel):
    doctor_id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department_id: Optional[int] = None
    hire_date: Optional[date] = None
    is_active: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# 医生专长关联
class DoctorSpecialtyAdd(BaseModel):
    specialty_id: int = Field(description="专长ID")


class DoctorSpecialtyCreate(DoctorSpecialtyAdd):
    doctor_id: int = Field(description="医生ID")


class DoctorSpecialtyResponse(BaseModel):
    doctor_id: int
    specialty_id: int

    class Config:
        from_attributes = True
