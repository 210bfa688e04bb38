from sqlalchemy import Column, Integer, SmallInteger, Text, DateTime, Enum, ForeignKey, Index, func
from sqlalchemy.orm import relationship
from clinic.db.base import Base
import enum


class AppointmentStatus(enum.Enum):
    SCHEDULED = "Scheduled"      # 已预约
    COMPLETED = "Completed"      # 已完成
    CANCELLED = "Cancelled"      # 已取消
    NO_SHOW = "No-Show"          # 未到场


class Appointment(Base):
    """
    预约表：一个预约关联一位患者和一位医生
    - patient_id: 患者删除时级联删除
    - doctor_id: 医生存在预约时禁止删除 (RESTRICT)
    """
    __tablename__ = "appointments"
    __table_args__ = (
        # 按患者/医生/时间查询预约
        Index("idx_appointments_patient", "patient_id"),
        Index("idx_appointments_doctor", "doctor_id"),
        Index("idx_appointments_datetime", "appointment_datetime"),
    )

    appointment_id = Column(Integer, primary_key=True, autoincrement=True, comment="预约ID")
    patient_id = Column(
        Integer,
        ForeignKey("patients.patient_id", name="fk_appointment_patient", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        comment="关联 patients.patient_id"
    )
    doctor_id = Column(
        Integer,
        ForeignKey("doctors.doctor_id", name="fk_appointment_doctor", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        comment="关联 doctors.doctor_id"
    )
    appointment_datetime = Column(DateTime, nullable=False, comment="就诊时间")
    duration_minutes = Column(SmallInteger, nullable=False, default=30, server_default="30", comment="时长(分钟)")
    status = Column(
        Enum(AppointmentStatus, values_callable=lambda e: [v.value for v in e], name="appointmentstatus", native_enum=False, create_constraint=True),
        default=AppointmentStatus.SCHEDULED,
        server_default=AppointmentStatus.SCHEDULED.value,
        nullable=False,
        comment="预约状态"
    )
    reason = Column(Text, nullable=True, comment="就诊原因")
    created_at = Column(DateTime, server_default=func.now(), comment="创建时间")

    # 关系（便于 ORM 查询）
    patient = relationship("Patient", back_populates="appointments")
    doctor = relationship("Doctor", back_populates="appointments")
    treatments = relationship("AppointmentTreatment", back_populates="appointment", cascade="all", passive_deletes=True)
    prescriptions = relationship("Prescription", back_populates="appointment", cascade="all", passive_deletes=True)
    payments = relationship("Payment", back_populates="appointment", cascade="all", passive_deletes=True)
