from sqlalchemy import Column, Integer, String, Boolean, Enum, DateTime, func, true
from clinic.db.base import Base
import enum

# 定义员工角色枚举
class UserRole(enum.Enum):
    ADMIN = "Admin"               # 管理员
    DOCTOR = "Doctor"             # 医生
    RECEPTION = "Reception"       # 前台
    PHARMACIST = "Pharmacist"     # 药剂师

# 诊所员工账号表
class User(Base):
    __tablename__ = "users"

    # id
    user_id = Column(Integer, primary_key=True, autoincrement=True)

    username = Column(String(80), nullable=False, unique=True, comment="登录名")

    # 安全字段: 只保存加盐hash, 不保存明文
    password_hash = Column(String(255), nullable=False)

    full_name = Column(String(150), nullable=True, comment="姓名")

    # 将 Enum 存储为枚举的 value，并显式指定 name 以便数据库迁移可识别
    role = Column(
        Enum(
            UserRole,
            values_callable=lambda enum_cls: [e.value for e in enum_cls],
            name="userrole",
            native_enum=False,
            create_constraint=True,
        ),
        nullable=False,
        default=UserRole.RECEPTION,
        server_default=UserRole.RECEPTION.value,
        comment="员工角色",
    )

    # 状态字段
    is_active = Column(Boolean, nullable=False, default=True, server_default=true(), comment="账号是否有效")

    # 创建时间字段
    created_at = Column(DateTime, server_default=func.now(), comment="创建时间")
