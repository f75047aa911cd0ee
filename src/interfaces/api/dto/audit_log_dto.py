"""AuditLog DTO - 只读，记录由 API 自身写入"""

from datetime import datetime
from typing import Any

from src.interfaces.api.dto.common import CamelModel


class AuditLogResponse(CamelModel):
    id: str
    user_id: str | None = None
    action: str
    entity_type: str
    entity_id: str | None = None
    description: str | None = None
    changes: dict[str, Any] | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    created_at: datetime
