"""AuditLogRepository Port - 只追加的操作历史"""

from typing import Any, Protocol


class AuditLogRecord(Protocol):
    id: str
    action: str
    entity_type: str
    entity_id: str | None


class AuditLogRepository(Protocol):
    async def create(self, values: dict[str, Any]) -> AuditLogRecord: ...

    async def list(self, **filters: Any) -> list[AuditLogRecord]: ...
