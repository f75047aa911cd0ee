"""Repository 和用例的提供者（FastAPI 依赖注入）

所有提供者共用 get_session 提供的请求级 AsyncSession，
同一个请求里的 Repository 操作同一个会话。

测试通过覆盖 get_session 把整个 API 指向临时数据库：

    app.dependency_overrides[get_session] = override_session
"""


from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.services.audit_recorder import AuditRecorder
from src.application.use_cases import (
    CreateTemplateUseCase,
    CreateWorkflowUseCase,
    DeleteTemplateUseCase,
    SeedDemoDataUseCase,
    UpdateTemplateUseCase,
    UpdateWorkflowStepUseCase,
)
from src.infrastructure.auth.password_hasher import PasswordHasher
from src.infrastructure.database.base import get_session
from src.infrastructure.database.repositories import (
    SQLAlchemyAuditLogRepository,
    SQLAlchemyDepartmentRepository,
    SQLAlchemyEmployeeRepository,
    SQLAlchemyNotificationRepository,
    SQLAlchemyReportingRepository,
    SQLAlchemyTaskRepository,
    SQLAlchemyTemplateRepository,
    SQLAlchemyTemplateStepRepository,
    SQLAlchemyUserRepository,
    SQLAlchemyWorkflowRepository,
    SQLAlchemyWorkflowStepRepository,
)

# ==================== Repositories ====================


def get_user_repository(session: AsyncSession = Depends(get_session)) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(session)


def get_department_repository(
    session: AsyncSession = Depends(get_session),
) -> SQLAlchemyDepartmentRepository:
    return SQLAlchemyDepartmentRepository(session)


def get_employee_repository(
    session: AsyncSession = Depends(get_session),
) -> SQLAlchemyEmployeeRepository:
    return SQLAlchemyEmployeeRepository(session)


def get_template_repository(
    session: AsyncSession = Depends(get_session),
) -> SQLAlchemyTemplateRepository:
    return SQLAlchemyTemplateRepository(session)


def get_template_step_repository(
    session: AsyncSession = Depends(get_session),
) -> SQLAlchemyTemplateStepRepository:
    return SQLAlchemyTemplateStepRepository(session)


def get_workflow_repository(
    session: AsyncSession = Depends(get_session),
) -> SQLAlchemyWorkflowRepository:
    return SQLAlchemyWorkflowRepository(session)


def get_workflow_step_repository(
    session: AsyncSession = Depends(get_session),
) -> SQLAlchemyWorkflowStepRepository:
    return SQLAlchemyWorkflowStepRepository(session)


def get_task_repository(session: AsyncSession = Depends(get_session)) -> SQLAlchemyTaskRepository:
    return SQLAlchemyTaskRepository(session)


def get_notification_repository(
    session: AsyncSession = Depends(get_session),
) -> SQLAlchemyNotificationRepository:
    return SQLAlchemyNotificationRepository(session)


def get_audit_log_repository(
    session: AsyncSession = Depends(get_session),
) -> SQLAlchemyAuditLogRepository:
    return SQLAlchemyAuditLogRepository(session)


def get_reporting_repository(
    session: AsyncSession = Depends(get_session),
) -> SQLAlchemyReportingRepository:
    return SQLAlchemyReportingRepository(session)


# ==================== 服务 / 用例 ====================


def get_audit_recorder(
    audit_log_repository: SQLAlchemyAuditLogRepository = Depends(get_audit_log_repository),
) -> AuditRecorder:
    return AuditRecorder(audit_log_repository)


def get_create_workflow_use_case(
    workflow_repository: SQLAlchemyWorkflowRepository = Depends(get_workflow_repository),
    workflow_step_repository: SQLAlchemyWorkflowStepRepository = Depends(
        get_workflow_step_repository
    ),
    template_repository: SQLAlchemyTemplateRepository = Depends(get_template_repository),
    template_step_repository: SQLAlchemyTemplateStepRepository = Depends(
        get_template_step_repository
    ),
    employee_repository: SQLAlchemyEmployeeRepository = Depends(get_employee_repository),
    audit_recorder: AuditRecorder = Depends(get_audit_recorder),
) -> CreateWorkflowUseCase:
    return CreateWorkflowUseCase(
        workflow_repository=workflow_repository,
        workflow_step_repository=workflow_step_repository,
        template_repository=template_repository,
        template_step_repository=template_step_repository,
        employee_repository=employee_repository,
        audit_recorder=audit_recorder,
    )


def get_update_workflow_step_use_case(
    workflow_step_repository: SQLAlchemyWorkflowStepRepository = Depends(
        get_workflow_step_repository
    ),
    workflow_repository: SQLAlchemyWorkflowRepository = Depends(get_workflow_repository),
) -> UpdateWorkflowStepUseCase:
    return UpdateWorkflowStepUseCase(
        workflow_step_repository=workflow_step_repository,
        workflow_repository=workflow_repository,
    )


def _template_dependencies(
    template_repository: SQLAlchemyTemplateRepository = Depends(get_template_repository),
    template_step_repository: SQLAlchemyTemplateStepRepository = Depends(
        get_template_step_repository
    ),
    audit_recorder: AuditRecorder = Depends(get_audit_recorder),
) -> dict:
    return {
        "template_repository": template_repository,
        "template_step_repository": template_step_repository,
        "audit_recorder": audit_recorder,
    }


def get_create_template_use_case(
    deps: dict = Depends(_template_dependencies),
) -> CreateTemplateUseCase:
    return CreateTemplateUseCase(**deps)


def get_update_template_use_case(
    deps: dict = Depends(_template_dependencies),
) -> UpdateTemplateUseCase:
    return UpdateTemplateUseCase(**deps)


def get_delete_template_use_case(
    deps: dict = Depends(_template_dependencies),
) -> DeleteTemplateUseCase:
    return DeleteTemplateUseCase(**deps)


def get_seed_demo_data_use_case(
    session: AsyncSession = Depends(get_session),
) -> SeedDemoDataUseCase:
    return SeedDemoDataUseCase(
        department_repository=SQLAlchemyDepartmentRepository(session),
        user_repository=SQLAlchemyUserRepository(session),
        employee_repository=SQLAlchemyEmployeeRepository(session),
        template_repository=SQLAlchemyTemplateRepository(session),
        template_step_repository=SQLAlchemyTemplateStepRepository(session),
        workflow_repository=SQLAlchemyWorkflowRepository(session),
        workflow_step_repository=SQLAlchemyWorkflowStepRepository(session),
        task_repository=SQLAlchemyTaskRepository(session),
        hash_password=PasswordHasher.hash_password,
    )
