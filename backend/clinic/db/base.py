from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine
from sqlalchemy.orm import sessionmaker, declarative_base

from clinic.core.config import settings


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """按数据库类型创建异步引擎

    - MySQL: 使用连接池参数并设置连接超时
    - SQLite: 每个连接打开 PRAGMA foreign_keys, 让 ON DELETE CASCADE/SET NULL/RESTRICT 生效
    """
    backend = make_url(url).get_backend_name()
    options = {"echo": settings.SQL_ECHO, "pool_pre_ping": True}
    if backend == "mysql":
        options.update(
            pool_recycle=3600,          # 连接回收时间（秒），避免使用超时的连接
            pool_size=10,               # 连接池大小
            max_overflow=20,            # 超出 pool_size 后最多再创建的连接数
            pool_timeout=30,            # 获取连接的超时时间（秒）
            connect_args={"connect_timeout": 10},
        )
    options.update(kwargs)

    async_engine = create_async_engine(url, **options)

    if backend == "sqlite":
        @event.listens_for(async_engine.sync_engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return async_engine


def build_sessionmaker(bind: AsyncEngine):
    return sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


#异步引擎连接数据库
engine = build_engine(settings.DATABASE_URL)

#事务处理
AsyncSessionLocal = build_sessionmaker(engine)

#全局Base
Base = declarative_base()

#引用表类(****十分重要, create_all 依赖这里的导入)
#只能 import 包本身: 模型模块会反向导入 Base, from-import 会在循环导入时失败
import clinic.models # noqa


#建表(已存在的表跳过), drop=True 时先删除全部表
async def init_models(bind: AsyncEngine = None, drop: bool = False):
    bind = bind or engine
    async with bind.begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

#异步获取事务函数
async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
