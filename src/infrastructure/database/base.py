"""ORM 基类和会话管理

- Base: 所有 ORM 模型的声明式基类；Base.metadata 供 Alembic 使用
- AsyncSessionLocal: 绑定全局异步引擎的会话工厂
- get_session: FastAPI 依赖，每个请求一个会话
"""


from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from src.infrastructure.database.engine import async_engine


class Base(DeclarativeBase):
    """ORM 模型基类（SQLAlchemy 2.0 风格）"""

    pass


AsyncSessionLocal = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,  # 提交后对象仍可读取，便于序列化
    autoflush=False,
    autocommit=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """在一次请求期间提供数据库会话

    用法：
        @router.get("/departments")
        async def list_departments(session: AsyncSession = Depends(get_session)):
            ...

    请求结束时（无论成功还是抛出异常）关闭会话，未提交的修改在关闭时回滚。

    生成：
        AsyncSession
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
