"""领域端口 - 用例依赖的持久化契约

实现位于 src.infrastructure.database.repositories。
"""

from src.domain.ports.audit_log_repository import AuditLogRecord, AuditLogRepository
from src.domain.ports.crud_repository import CrudRepository, EntityRecord
from src.domain.ports.template_repository import (
    TemplateRecord,
    TemplateRepository,
    TemplateStepRecord,
    TemplateStepRepository,
)
from src.domain.ports.workflow_repository import (
    WorkflowRecord,
    WorkflowRepository,
    WorkflowStepRecord,
    WorkflowStepRepository,
)

__all__ = [
    "AuditLogRecord",
    "AuditLogRepository",
    "CrudRepository",
    "EntityRecord",
    "TemplateRecord",
    "TemplateRepository",
    "TemplateStepRecord",
    "TemplateStepRepository",
    "WorkflowRecord",
    "WorkflowRepository",
    "WorkflowStepRecord",
    "WorkflowStepRepository",
]
