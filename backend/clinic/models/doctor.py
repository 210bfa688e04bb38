from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean, ForeignKey, func, true
from sqlalchemy.orm import relationship
from clinic.db.base import Base


class Doctor(Base):
    """诊所医生表"""
    __tablename__ = "doctors"

    doctor_id = Column(Integer, primary_key=True, autoincrement=True, comment="医生唯一 ID")
    first_name = Column(String(60), nullable=False, comment="名")
    last_name = Column(String(60), nullable=False, comment="姓")
    email = Column(String(150), nullable=False, unique=True, comment="邮箱(全局唯一)")
    phone = Column(String(30), nullable=True, comment="电话")
    department_id = Column(
        Integer,
        ForeignKey("departments.department_id", name="fk_doctor_department", ondelete="SET NULL", onupdate="CASCADE"),
        nullable=True,
        comment="外键，关联 departments.department_id, 科室删除后置空"
    )
    hire_date = Column(Date, nullable=True, comment="入职日期")
    is_active = Column(Boolean, nullable=False, default=True, server_default=true(), comment="是否在职")
    created_at = Column(DateTime, server_default=func.now(), comment="记录创建时间")

    # 关系字段
    department = relationship("Department", back_populates="doctors")
    specialty_links = relationship("DoctorSpecialty", back_populates="doctor", cascade="all", passive_deletes=True)
    # RESTRICT: 有预约时禁止删除医生, ORM 不处理子记录
    appointments = relationship("Appointment", back_populates="doctor", passive_deletes="all")
