from decimal import Decimal
from sqlalchemy import Column, Integer, SmallInteger, String, Text, Numeric
from sqlalchemy.orm import relationship
from clinic.db.base import Base


class Treatment(Base):
    """诊疗项目目录表"""
    __tablename__ = "treatments"

    treatment_id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(30), nullable=False, unique=True, comment='项目编码, 如 "TREAT-001"')
    name = Column(String(120), nullable=False, comment="项目名称")
    description = Column(Text, nullable=True, comment="描述")
    price = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"), server_default="0.00", comment="价格")
    duration_minutes = Column(SmallInteger, nullable=True, comment="时长(分钟)")

    # RESTRICT: 已被预约引用的项目禁止删除
    appointment_links = relationship("AppointmentTreatment", back_populates="treatment", passive_deletes="all")
