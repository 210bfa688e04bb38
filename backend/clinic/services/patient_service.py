from clinic.models.patient import Patient
from clinic.schemas.patient import PatientCreate, PatientUpdate
from clinic.services.crud_service import CrudService


# 删除患者: 预约及其处方、处方明细、诊疗项目、付款全部由数据库级联删除
patient_service = CrudService(Patient, PatientCreate, PatientUpdate)
