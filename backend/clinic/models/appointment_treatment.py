from decimal import Decimal
from sqlalchemy import Column, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from clinic.db.base import Base


class AppointmentTreatment(Base):
    """预约中实施的诊疗项目 (多对多), price_at_time 为下单时的价格快照"""
    __tablename__ = "appointment_treatments"

    appointment_id = Column(
        Integer,
        ForeignKey("appointments.appointment_id", name="fk_at_appointment", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True
    )
    treatment_id = Column(
        Integer,
        ForeignKey("treatments.treatment_id", name="fk_at_treatment", ondelete="RESTRICT", onupdate="CASCADE"),
        primary_key=True
    )
    quantity = Column(Integer, nullable=False, default=1, server_default="1", comment="数量")
    price_at_time = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"), server_default="0.00", comment="当时价格")

    # 关系字段
    appointment = relationship("Appointment", back_populates="treatments")
    treatment = relationship("Treatment", back_populates="appointment_links")
