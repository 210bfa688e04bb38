from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from clinic.db.base import Base


class Medication(Base):
    """药品目录表, (name, brand) 唯一"""
    __tablename__ = "medications"
    __table_args__ = (
        UniqueConstraint("name", "brand", name="uq_medication_name_brand"),
    )

    medication_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False, comment="药品名")
    brand = Column(String(120), nullable=True, comment="品牌")
    form = Column(String(50), nullable=True, comment="剂型, 如 tablet, syrup")
    strength = Column(String(50), nullable=True, comment="规格, 如 500mg")

    # RESTRICT: 已被处方引用的药品禁止删除
    prescription_links = relationship("PrescriptionItem", back_populates="medication", passive_deletes="all")
