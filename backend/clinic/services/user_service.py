from clinic.core.security import get_hash_pwd
from clinic.models.user import User
from clinic.schemas.user import UserCreate, UserUpdate
from clinic.services.crud_service import CrudService


class UserService(CrudService):
    """员工账号: 明文密码入库前转换为加盐hash"""

    def prepare_values(self, values: dict) -> dict:
        values = dict(values)
        password = values.pop("password", None)
        if password is not None:
            values["password_hash"] = get_hash_pwd(password)
        return values


user_service = UserService(User, UserCreate, UserUpdate)
