from sqlalchemy import Column, Integer, String, Numeric, DateTime, Enum, ForeignKey, func
from sqlalchemy.orm import relationship
from clinic.db.base import Base
import enum


class PaymentMethod(enum.Enum):
    CASH = "Cash"                    # 现金
    CARD = "Card"                    # 银行卡
    MOBILE_MONEY = "Mobile Money"    # 移动支付
    INSURANCE = "Insurance"          # 保险


class Payment(Base):
    """预约/诊疗的付款记录"""
    __tablename__ = "payments"

    payment_id = Column(Integer, primary_key=True, autoincrement=True, comment="付款ID")
    appointment_id = Column(
        Integer,
        ForeignKey("appointments.appointment_id", name="fk_payment_appointment", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        comment="关联 appointments.appointment_id"
    )
    amount = Column(Numeric(10, 2), nullable=False, comment="金额")
    method = Column(
        Enum(PaymentMethod, values_callable=lambda e: [v.value for v in e], name="paymentmethod", native_enum=False, create_constraint=True),
        nullable=False,
        comment="付款方式"
    )
    paid_at = Column(DateTime, server_default=func.now(), comment="付款时间")
    reference = Column(String(150), nullable=True, comment="流水号/凭证号")

    # 关系字段
    appointment = relationship("Appointment", back_populates="payments")
