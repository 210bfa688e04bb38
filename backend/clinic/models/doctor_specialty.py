from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from clinic.db.base import Base


class DoctorSpecialty(Base):
    """医生-专长 多对多关联表, 复合主键 (doctor_id, specialty_id)"""
    __tablename__ = "doctor_specialties"

    doctor_id = Column(
        Integer,
        ForeignKey("doctors.doctor_id", name="fk_ds_doctor", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True
    )
    specialty_id = Column(
        Integer,
        ForeignKey("specialties.specialty_id", name="fk_ds_specialty", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True
    )

    # 关系字段
    doctor = relationship("Doctor", back_populates="specialty_links")
    specialty = relationship("Specialty", back_populates="doctor_links")
