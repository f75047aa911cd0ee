"""CrudRepository Port - 所有实体共用的持久化契约

语义：
- get(): 返回记录；不存在时返回 None
- list(): 等值过滤条件以 AND 组合，值为 None 的条件忽略；
  每个实现有一个固定的排序
- create(): 插入并返回存储后的记录（已填充 id 和时间戳）
- update(): 只合并传入的字段并刷新 updated_at；记录不存在时返回 None
- delete(): 物理删除，不检查是否存在，也不级联

每次写入单独提交。调用方连续多次写入时没有外层事务包裹。
"""

from typing import Any, Protocol, TypeVar


class EntityRecord(Protocol):
    """Repository 持久化的对象都有 id"""

    id: str


RecordT = TypeVar("RecordT", bound=EntityRecord, covariant=True)


class CrudRepository(Protocol[RecordT]):
    async def get(self, entity_id: str) -> RecordT | None: ...

    async def list(self, **filters: Any) -> list[RecordT]: ...

    async def create(self, values: dict[str, Any]) -> RecordT: ...

    async def update(self, entity_id: str, values: dict[str, Any]) -> RecordT | None: ...

    async def delete(self, entity_id: str) -> bool: ...
