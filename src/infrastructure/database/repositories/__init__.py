"""Repository 实现 - 持久化网关

每张表一个异步 Repository，直接在请求的 AsyncSession 上执行 ORM 查询，
实现 src.domain.ports 中定义的 Protocol。
"""

from src.infrastructure.database.repositories.audit_log_repository import (
    SQLAlchemyAuditLogRepository,
)
from src.infrastructure.database.repositories.department_repository import (
    SQLAlchemyDepartmentRepository,
)
from src.infrastructure.database.repositories.employee_repository import (
    SQLAlchemyEmployeeRepository,
)
from src.infrastructure.database.repositories.notification_repository import (
    SQLAlchemyNotificationRepository,
)
from src.infrastructure.database.repositories.reporting_repository import (
    SQLAlchemyReportingRepository,
)
from src.infrastructure.database.repositories.task_repository import SQLAlchemyTaskRepository
from src.infrastructure.database.repositories.template_repository import (
    SQLAlchemyTemplateRepository,
    SQLAlchemyTemplateStepRepository,
)
from src.infrastructure.database.repositories.user_repository import SQLAlchemyUserRepository
from src.infrastructure.database.repositories.workflow_repository import (
    SQLAlchemyWorkflowRepository,
    SQLAlchemyWorkflowStepRepository,
)

__all__ = [
    "SQLAlchemyAuditLogRepository",
    "SQLAlchemyDepartmentRepository",
    "SQLAlchemyEmployeeRepository",
    "SQLAlchemyNotificationRepository",
    "SQLAlchemyReportingRepository",
    "SQLAlchemyTaskRepository",
    "SQLAlchemyTemplateRepository",
    "SQLAlchemyTemplateStepRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyWorkflowRepository",
    "SQLAlchemyWorkflowStepRepository",
]
