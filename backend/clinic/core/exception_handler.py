# exception_handlers.py
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import traceback
import logging
import json
from clinic.schemas.response import ResponseModel, UnknownErrorResponse, HTTPErrorResponse, DataAccessErrorResponse
from clinic.core.config import settings


logger = logging.getLogger(__name__)

class DataAccessError(Exception):
    """数据访问层异常基类, detail 必须为 dict, 包含 code 和 msg 字段"""
    default_code: int = settings.UNKNOWN_ERROR_CODE
    default_status_code: int = 400
    error: str = "数据操作失败"

    def __init__(self, msg: str, code: int | None = None, status_code: int | None = None):
        self.status_code = status_code or self.default_status_code
        self.detail = {"code": code or self.default_code, "msg": msg}
        super().__init__(msg)

class NotFound(DataAccessError):
    """请求的记录不存在"""
    default_code = settings.NOT_FOUND_CODE
    default_status_code = 404
    error = "记录不存在"

class ConstraintViolation(DataAccessError):
    """唯一性、必填字段或外键约束被破坏"""
    default_code = settings.CONSTRAINT_VIOLATION_CODE
    default_status_code = 409
    error = "数据约束冲突"

class ReferentialRestrict(DataAccessError):
    """删除被 RESTRICT 外键拦截: 仍有依赖记录引用该行"""
    default_code = settings.REFERENTIAL_RESTRICT_CODE
    default_status_code = 409
    error = "存在依赖记录, 禁止删除"


def register_exception_handlers(app):
    """全局异常处理器

    Args:
        app (FastAPI): 需要注册处理器的应用
    """

    #无法处理异常
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled Exception: {traceback.format_exc()}")

        return JSONResponse(
            status_code=500,
            content=ResponseModel(
                code=settings.UNKNOWN_ERROR_CODE,
                message=UnknownErrorResponse(error="未知错误", detail=str(exc))
            ).model_dump(),
        )

    #HTTP异常
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"HTTPException: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ResponseModel(
                code=settings.HTTP_ERROR_CODE,
                message=HTTPErrorResponse(error="HTTP异常", detail=str(exc.detail))
            ).model_dump(),
        )

    #验证异常
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info(f"Validation Error: {errors}")

        # ctx 中可能包含异常对象, 统一转成字符串
        serializable_errors = []
        for e in errors:
            error_dict = {
                "type": str(e.get("type", "unknown")),
                "loc": [str(part) for part in e.get("loc", [])],
                "msg": str(e.get("msg", "")),
            }
            ctx = e.get("ctx")
            if isinstance(ctx, dict):
                error_dict["ctx"] = {k: str(v) for k, v in ctx.items()}
            serializable_errors.append(error_dict)

        return JSONResponse(
            status_code=422,
            content=ResponseModel(
                code=settings.REQ_ERROR_CODE,
                message={
                    "error": "请求参数验证失败",
                    "msg": json.dumps(serializable_errors, ensure_ascii=False)
                }
            ).model_dump(),
        )

    #数据访问异常(NotFound / ConstraintViolation / ReferentialRestrict)
    @app.exception_handler(DataAccessError)
    async def data_access_exception_handler(request: Request, exc: DataAccessError):
        logger.warning(f"{type(exc).__name__}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=ResponseModel(
                code=exc.detail["code"],
                message=DataAccessErrorResponse(error=exc.error, msg=exc.detail["msg"])
            ).model_dump(),
        )
