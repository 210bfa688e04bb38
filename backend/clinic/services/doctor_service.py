from clinic.models.doctor import Doctor
from clinic.models.doctor_specialty import DoctorSpecialty
from clinic.schemas.doctor import DoctorCreate, DoctorUpdate, DoctorSpecialtyCreate, DoctorSpecialtyAdd
from clinic.services.crud_service import CrudService


# 有预约的医生禁止删除; 没有预约时删除医生会级联删除其专长关联
doctor_service = CrudService(Doctor, DoctorCreate, DoctorUpdate)

# 关联表只有主键, 没有可更新字段
doctor_specialty_service = CrudService(DoctorSpecialty, DoctorSpecialtyCreate, DoctorSpecialtyAdd)
