from sqlalchemy import Column, Integer, String, Text, DateTime, func
from sqlalchemy.orm import relationship
from clinic.db.base import Base


class Department(Base):
    """科室表 (如: 心内科, 儿科)"""
    __tablename__ = "departments"

    department_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True, comment="科室名称")
    description = Column(Text, nullable=True, comment="描述")
    created_at = Column(DateTime, server_default=func.now(), comment="创建时间")

    # 关系字段: 删除科室时由数据库把 doctors.department_id 置空
    doctors = relationship("Doctor", back_populates="department", passive_deletes=True)
