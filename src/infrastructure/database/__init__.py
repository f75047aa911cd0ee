"""数据库基础设施 - SQLAlchemy 异步引擎、会话和 ORM 模型"""

from src.infrastructure.database.base import AsyncSessionLocal, Base, get_session
from src.infrastructure.database.engine import async_engine, get_engine

__all__ = [
    "AsyncSessionLocal",
    "Base",
    "async_engine",
    "get_engine",
    "get_session",
]
