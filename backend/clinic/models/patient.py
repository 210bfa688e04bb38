from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Enum, UniqueConstraint, func
from sqlalchemy.orm import relationship
from clinic.db.base import Base
import enum


# 定义性别枚举
class Gender(enum.Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Patient(Base):
    """患者信息表"""
    __tablename__ = "patients"
    __table_args__ = (
        UniqueConstraint("email", name="uq_patient_email"),
    )

    patient_id = Column(Integer, primary_key=True, autoincrement=True, comment="患者 ID")
    first_name = Column(String(60), nullable=False, comment="名")
    last_name = Column(String(60), nullable=False, comment="姓")
    date_of_birth = Column(Date, nullable=True, comment="出生日期")
    # 使用枚举的 value 存储（"Male"/"Female"/"Other"）
    gender = Column(
        Enum(Gender, values_callable=lambda e: [v.value for v in e], name="gender", native_enum=False, create_constraint=True),
        nullable=True,
        comment="性别"
    )
    email = Column(String(150), nullable=True, comment="邮箱(填写时唯一)")
    phone = Column(String(30), nullable=True, comment="电话")
    address = Column(Text, nullable=True, comment="住址")
    created_at = Column(DateTime, server_default=func.now(), comment="创建时间")

    # 关系字段: 删除患者时由数据库级联删除其预约
    appointments = relationship("Appointment", back_populates="patient", cascade="all", passive_deletes=True)
