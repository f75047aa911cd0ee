"""Audit Logs 路由

- GET /api/audit-logs?entityType=&entityId=&userId=   - 最新的在前，有条数上限
"""


from fastapi import APIRouter, Depends, Query

from src.infrastructure.database.repositories import SQLAlchemyAuditLogRepository
from src.interfaces.api.dependencies.repositories import get_audit_log_repository
from src.interfaces.api.dto import AuditLogResponse

router = APIRouter(prefix="/audit-logs", tags=["audit-logs"])


@router.get("", response_model=list[AuditLogResponse])
async def list_audit_logs(
    entity_type: str | None = Query(default=None, alias="entityType"),
    entity_id: str | None = Query(default=None, alias="entityId"),
    user_id: str | None = Query(default=None, alias="userId"),
    repository: SQLAlchemyAuditLogRepository = Depends(get_audit_log_repository),
) -> list[AuditLogResponse]:
    logs = await repository.list(entity_type=entity_type, entity_id=entity_id, user_id=user_id)
    return [AuditLogResponse.model_validate(log) for log in logs]
