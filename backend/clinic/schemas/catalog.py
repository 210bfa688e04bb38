from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal


# 科室

class DepartmentCreate(BaseModel):
    name: str = Field(max_length=100, description="科室名称")
    description: Optional[str] = Field(None, description="描述")


class DepartmentUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100, description="科室名称")
    description: Optional[str] = Field(None, description="描述")


class DepartmentResponse(BaseModel):
    department_id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# 专长

class SpecialtyCreate(BaseModel):
    name: str = Field(max_length=100, description="专长名称")
    description: Optional[str] = Field(None, description="描述")


class SpecialtyUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100, description="专长名称")
    description: Optional[str] = Field(None, description="描述")


class SpecialtyResponse(BaseModel):
    specialty_id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


# 诊疗项目

class TreatmentCreate(BaseModel):
    code: str = Field(max_length=30, description='项目编码, 如 "T001"')
    name: str = Field(max_length=120, description="项目名称")
    description: Optional[str] = Field(None, description="描述")
    price: Decimal = Field(Decimal("0.00"), max_digits=10, decimal_places=2, description="价格")
    duration_minutes: Optional[int] = Field(None, description="时长(分钟)")


class TreatmentUpdate(BaseModel):
    code: Optional[str] = Field(None, max_length=30, description="项目编码")
    name: Optional[str] = Field(None, max_length=120, description="项目名称")
    description: Optional[str] = Field(None, description="描述")
    price: Optional[Decimal] = Field(None, max_digits=10, decimal_places=2, description="价格")
    duration_minutes: Optional[int] = Field(None, description="时长(分钟)")


class TreatmentResponse(BaseModel):
    treatment_id: int
    code: str
    name: str
    description: Optional[str] = None
    price: Decimal
    duration_minutes: Optional[int] = None

    class Config:
        from_attributes = True


# 药品

class MedicationCreate(BaseModel):
    name: str = Field(max_length=150, description="药品名")
    brand: Optional[str] = Field(None, max_length=120, description="品牌")
    form: Optional[str] = Field(None, max_length=50, description="剂型")
    strength: Optional[str] = Field(None, max_length=50, description="规格")


class MedicationUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=150, description="药品名")
    brand: Optional[str] = Field(None, max_length=120, description="品牌")
    form: Optional[str] = Field(None, max_length=50, description="剂型")
    strength: Optional[str] = Field(None, max_length=50, description="规格")


class MedicationResponse(BaseModel):
    medication_id: int
    name: str
    brand: Optional[str] = None
    form: Optional[str] = None
    strength: Optional[str] = None

    class Config:
        from_attributes = True
