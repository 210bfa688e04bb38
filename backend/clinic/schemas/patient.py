from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

from clinic.models.patient import Gender


class PatientCreate(BaseModel):
    first_name: str = Field(max_length=60, description="名")
    last_name: str = Field(max_length=60, description="姓")
    date_of_birth: Optional[date] = Field(None, description="出生日期")
    gender: Optional[Gender] = Field(None, description="性别: Male/Female/Other")
    email: Optional[str] = Field(None, max_length=150, description="邮箱(填写时唯一)")
    phone: Optional[str] = Field(None, max_length=30, description="电话")
    address: Optional[str] = Field(None, description="住址")


class PatientUpdate(BaseModel):
    first_name: Optional[str] = Field(None, max_length=60, description="名")
    last_name: Optional[str] = Field(None, max_length=60, description="姓")
    date_of_birth: Optional[date] = Field(None, description="出生日期")
    gender: Optional[Gender] = Field(None, description="性别")
    email: Optional[str] = Field(None, max_length=150, description="邮箱")
    phone: Optional[str] = Field(None, max_length=30, description="电话")
    address: Optional[str] = Field(None, description="住址")


class PatientResponse(BaseModel):
    patient_id: int
    first_name: str
    last_name: str
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
