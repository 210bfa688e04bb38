from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager
import os

from clinic.api import catalog, doctor, patient, appointment, prescription, payment, user
from clinic.core.exception_handler import register_exception_handlers
from clinic.core.log_middleware import LogMiddleware
from clinic.core.config import settings
from clinic.db.base import engine, init_models

# 确保 logs 文件夹存在
os.makedirs(settings.LOG_DIR, exist_ok=True)

# 配置日志
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[
        logging.FileHandler(os.path.join(settings.LOG_DIR, "app.log"), encoding="utf-8"),  # 写入到文件
        logging.StreamHandler()  # 控制台同时输出
    ]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 初始化数据库表（已存在的表跳过）
    await init_models(engine)
    logger.info("Database tables ready")
    logger.info("Application startup complete")

    yield  # 应用正常运行

    # 关闭数据库引擎
    await engine.dispose()
    logger.info("DB engine disposed")
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

    # 注册全局异常处理器
    register_exception_handlers(app)

    app.add_middleware(LogMiddleware)

    #中间件解决跨域
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    #引用子路由
    app.include_router(router=catalog.router, tags=["catalog"])
    app.include_router(router=doctor.router, prefix="/doctors", tags=["doctor"])
    app.include_router(router=patient.router, prefix="/patients", tags=["patient"])
    app.include_router(router=appointment.router, prefix="/appointments", tags=["appointment"])
    app.include_router(router=prescription.router, prefix="/prescriptions", tags=["prescription"])
    app.include_router(router=payment.router, prefix="/payments", tags=["payment"])
    app.include_router(router=user.router, prefix="/users", tags=["user"])
    logger.info("All routers registered successfully")

    #默认
    @app.get("/")
    async def root():
        return {"message": f"Welcome to {settings.PROJECT_NAME} API"}

    return app


app = create_app()
