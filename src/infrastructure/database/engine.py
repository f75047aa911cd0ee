"""数据库引擎配置

为什么需要单独的 engine 模块？
1. 测试可以创建自己的引擎，而不必导入 ORM 模型
2. 避免循环导入：Base 和 engine 分开定义

设计说明：
- 使用 create_async_engine 创建所有 Repository 共用的异步引擎
- 从配置读取 database_url
- SQLite 内存库共用同一个连接（StaticPool）；其他 URL 使用连接池
"""


from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from src.config import settings


def get_engine(database_url: str | None = None) -> AsyncEngine:
    """创建异步数据库引擎

    参数：
        database_url: 覆盖 settings.database_url（测试使用）

    返回：
        AsyncEngine
    """
    url = database_url or settings.database_url
    engine_args: dict[str, Any] = {
        "echo": settings.debug,
        "pool_pre_ping": True,
    }

    if url.startswith("sqlite"):
        engine_args["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url.endswith("://"):
            engine_args["poolclass"] = StaticPool
    else:
        engine_args["pool_size"] = 5
        engine_args["max_overflow"] = 10

    return create_async_engine(url, **engine_args)


# 全局异步引擎
async_engine = get_engine()
