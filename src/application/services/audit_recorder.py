"""AuditRecorder - 为需要审计的变更追加操作历史

需要审计的实体类型：user、department、employee、template、workflow。
对它们的每次 create / update / delete 恰好写入一条 AuditLog。

为什么审计写入失败要让请求失败？
- 审计记录不能悄悄丢失，所以异常直接抛给调用方，不做隔离或重试
"""


import logging
from typing import Any

from src.domain.ports.audit_log_repository import AuditLogRecord, AuditLogRepository

logger = logging.getLogger(__name__)


class AuditRecorder:
    """通过 AuditLog Repository 写入审计记录"""

    def __init__(self, audit_log_repository: AuditLogRepository):
        self.audit_log_repository = audit_log_repository

    async def record(
        self,
        action: str,
        entity_type: str,
        entity_id: str | None,
        description: str | None = None,
        user_id: str | None = None,
        changes: dict[str, Any] | None = None,
    ) -> AuditLogRecord:
        """追加一条审计记录

        参数：
            action: create / update / delete
            entity_type: user / department / employee / template / workflow
            entity_id: 受影响记录的 id
            description: 可读摘要（"Created employee John Doe"）
            user_id: 操作人（已知时）
            changes: 变更内容（可选）
        """
        entry = await self.audit_log_repository.create(
            {
                "action": action,
                "entity_type": entity_type,
                "entity_id": entity_id,
                "description": description,
                "user_id": user_id,
                "changes": changes,
            }
        )
        logger.info("审计记录 %s %s:%s", action, entity_type, entity_id)
        return entry

    async def created(self, entity_type: str, entity_id: str, label: str) -> AuditLogRecord:
        return await self.record("create", entity_type, entity_id, f"Created {entity_type} {label}")

    async def updated(self, entity_type: str, entity_id: str, label: str) -> AuditLogRecord:
        return await self.record("update", entity_type, entity_id, f"Updated {entity_type} {label}")

    async def deleted(self, entity_type: str, entity_id: str) -> AuditLogRecord:
        return await self.record("delete", entity_type, entity_id, f"Deleted {entity_type}")
