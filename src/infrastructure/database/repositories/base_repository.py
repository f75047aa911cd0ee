"""SQLAlchemy CRUD Repository 基类

每个实体 Repository 都是 ORM 查询的薄封装：

- get(id)                 -> 记录或 None
- list(**filters)         -> 等值过滤以 AND 组合，固定排序
- create(values)          -> 插入 + 提交，返回存储后的记录
- update(id, values)      -> 合并传入字段 + 提交，不存在时返回 None
- delete(id)              -> 物理删除 + 提交，不检查是否存在

每次写入立即提交，所以由多次调用组成的多行操作不是原子的。

为什么写入前要把带时区的 datetime 转成 UTC？
- SQLite 不保存时区偏移，只保留墙上时间；先转成 UTC，读回的值才是 UTC 时间
"""


from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import ColumnElement, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.database.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class SQLAlchemyCrudRepository(Generic[ModelT]):
    """单个 ORM 模型的通用异步 Repository

    子类需要设置：
    - model: ORM 类
    - order_by: list() 的固定排序
    - filterable: list() 接受的等值过滤属性名
    """

    model: ClassVar[type[Base]]
    order_by: ClassVar[Sequence[Any]] = ()
    filterable: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, session: AsyncSession):
        self.session = session

    # ==================== 读操作 ====================

    async def get(self, entity_id: str) -> ModelT | None:
        return await self.session.get(self.model, entity_id)

    async def list(self, **filters: Any) -> list[ModelT]:
        """返回满足所有非 None 等值条件的记录"""
        conditions = self._equality_conditions(filters)
        stmt = select(self.model).where(*conditions).order_by(*self.order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    # ==================== 写操作 ====================

    async def create(self, values: dict[str, Any]) -> ModelT:
        row = self.model(**{field: as_utc(value) for field, value in values.items()})
        self.session.add(row)
        await self.session.commit()
        await self.session.refresh(row)
        return row  # type: ignore[return-value]

    async def update(self, entity_id: str, values: dict[str, Any]) -> ModelT | None:
        row = await self.get(entity_id)
        if row is None:
            return None

        for field, value in values.items():
            setattr(row, field, as_utc(value))
        if hasattr(row, "updated_at"):
            row.updated_at = datetime.now(UTC)

        await self.session.commit()
        await self.session.refresh(row)
        return row

    async def delete(self, entity_id: str) -> bool:
        await self.session.execute(delete(self.model).where(self.model.id == entity_id))
        await self.session.commit()
        return True

    # ==================== 辅助方法 ====================

    def _equality_conditions(self, filters: dict[str, Any]) -> list[ColumnElement[bool]]:
        conditions = []
        for field, value in filters.items():
            if value is None:
                continue
            if field not in self.filterable:
                raise ValueError(f"{self.model.__name__} cannot be filtered by {field!r}")
            conditions.append(getattr(self.model, field) == value)
        return conditions


def as_utc(value: Any) -> Any:
    """带时区的 datetime -> 同一时刻的 UTC 时间；其他值原样返回"""
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(UTC)
    return value
