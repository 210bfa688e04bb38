from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from clinic.db.base import Base


class Prescription(Base):
    """预约中开具的处方"""
    __tablename__ = "prescriptions"

    prescription_id = Column(Integer, primary_key=True, autoincrement=True)
    appointment_id = Column(
        Integer,
        ForeignKey("appointments.appointment_id", name="fk_prescription_appointment", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False
    )
    notes = Column(Text, nullable=True, comment="医嘱备注")
    issued_at = Column(DateTime, server_default=func.now(), comment="开具时间")

    # 关系字段
    appointment = relationship("Appointment", back_populates="prescriptions")
    items = relationship("PrescriptionItem", back_populates="prescription", cascade="all", passive_deletes=True)
