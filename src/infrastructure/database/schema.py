"""数据库 schema 初始化

生产数据库通过 Alembic 迁移管理；SQLite（本地开发、演示）在启动时建表。
"""


from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from src.infrastructure.database.base import Base
from src.infrastructure.database.engine import async_engine

logger = logging.getLogger(__name__)


async def ensure_schema(engine: AsyncEngine | None = None, force: bool = False) -> bool:
    """尽力建表

    说明：
    - 除非 force=True，只对 SQLite URL 执行
    - 已存在的表保持不变

    返回：
        执行了 create_all 时返回 True
    """
    # 导入 models，把所有 ORM 模型注册到 Base.metadata
    from src.infrastructure.database import models as _models  # noqa: F401

    engine = engine or async_engine
    if not force and not str(engine.url).startswith("sqlite"):
        return False

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("数据库表结构已就绪: %s", engine.url.render_as_string(hide_password=True))
    return True
