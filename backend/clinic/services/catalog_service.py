"""科室、专长、诊疗项目、药品等目录类数据的访问服务"""

from clinic.models.department import Department
from clinic.models.specialty import Specialty
from clinic.models.treatment import Treatment
from clinic.models.medication import Medication
from clinic.schemas.catalog import (
    DepartmentCreate, DepartmentUpdate,
    SpecialtyCreate, SpecialtyUpdate,
    TreatmentCreate, TreatmentUpdate,
    MedicationCreate, MedicationUpdate,
)
from clinic.services.crud_service import CrudService


# 删除科室: 医生的 department_id 由数据库置空
department_service = CrudService(Department, DepartmentCreate, DepartmentUpdate)

# 删除专长: 医生-专长关联由数据库级联删除
specialty_service = CrudService(Specialty, SpecialtyCreate, SpecialtyUpdate)

# 被 appointment_treatments 引用时禁止删除
treatment_service = CrudService(Treatment, TreatmentCreate, TreatmentUpdate)

# 被 prescription_items 引用时禁止删除
medication_service = CrudService(Medication, MedicationCreate, MedicationUpdate)
