from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from clinic.db.base import Base


class Specialty(Base):
    """医生专长表 (如: 皮肤科, 耳鼻喉)"""
    __tablename__ = "specialties"

    specialty_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True, comment="专长名称")
    description = Column(Text, nullable=True, comment="描述")

    # 关系字段
    doctor_links = relationship("DoctorSpecialty", back_populates="specialty", cascade="all", passive_deletes=True)
