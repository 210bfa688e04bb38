from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from clinic.db.base import Base


class PrescriptionItem(Base):
    """处方明细 (处方-药品 多对多, 附带用法用量)"""
    __tablename__ = "prescription_items"

    prescription_id = Column(
        Integer,
        ForeignKey("prescriptions.prescription_id", name="fk_pi_prescription", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True
    )
    medication_id = Column(
        Integer,
        ForeignKey("medications.medication_id", name="fk_pi_medication", ondelete="RESTRICT", onupdate="CASCADE"),
        primary_key=True
    )
    dosage = Column(String(100), nullable=True, comment='用量, 如 "1 tablet twice daily"')
    duration_days = Column(Integer, nullable=True, comment="服用天数")
    instructions = Column(Text, nullable=True, comment="服用说明")

    # 关系字段
    prescription = relationship("Prescription", back_populates="items")
    medication = relationship("Medication", back_populates="prescription_links")
