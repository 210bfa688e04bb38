from typing import Generic, TypeVar, Optional
from pydantic import BaseModel

T = TypeVar("T")


# 通用响应模型
class ResponseModel(BaseModel, Generic[T]):
    code: int
    message: Optional[T]

# ====== 全局异常相关返回类型 ======
class UnknownErrorResponse(BaseModel):
    error: str
    detail: str

class HTTPErrorResponse(BaseModel):
    error: str
    detail: str

class DataAccessErrorResponse(BaseModel):
    error: str
    msg: str


# ====== 通用操作返回类型 ======

# 删除成功返回的数据模型
class DeleteResponse(BaseModel):
    detail: str
