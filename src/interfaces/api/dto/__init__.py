"""API DTO（数据传输对象）

职责：
1. 校验请求体（pydantic v2）
2. 塑形响应：camelCase 键，永远不包含 password
3. 把请求体转换为 ORM 列值（to_values）

请求同时接受 camelCase 和 snake_case 键；响应通过 from_attributes 从 ORM
记录构建，并按别名序列化。
"""


from src.interfaces.api.dto.audit_log_dto import AuditLogResponse
from src.interfaces.api.dto.common import CamelModel, ErrorResponse, FieldErrorDTO, PatchModel
from src.interfaces.api.dto.department_dto import (
    CreateDepartmentRequest,
    DepartmentResponse,
    UpdateDepartmentRequest,
)
from src.interfaces.api.dto.employee_dto import (
    CreateEmployeeRequest,
    EmployeeResponse,
    UpdateEmployeeRequest,
)
from src.interfaces.api.dto.notification_dto import (
    CreateNotificationRequest,
    MarkAllReadRequest,
    NotificationResponse,
)
from src.interfaces.api.dto.report_dto import DashboardStatsResponse, WorkflowMetricsResponse
from src.interfaces.api.dto.seed_dto import SeedResponse
from src.interfaces.api.dto.task_dto import CreateTaskRequest, TaskResponse, UpdateTaskRequest
from src.interfaces.api.dto.template_dto import (
    CreateTemplateRequest,
    TemplateDetailResponse,
    TemplateResponse,
    TemplateStepInput,
    TemplateStepResponse,
    UpdateTemplateRequest,
)
from src.interfaces.api.dto.user_dto import CreateUserRequest, UpdateUserRequest, UserResponse
from src.interfaces.api.dto.workflow_dto import (
    CreateWorkflowRequest,
    UpdateWorkflowRequest,
    UpdateWorkflowStepRequest,
    WorkflowDetailResponse,
    WorkflowResponse,
    WorkflowStepResponse,
)

__all__ = [
    "AuditLogResponse",
    "CamelModel",
    "CreateDepartmentRequest",
    "CreateEmployeeRequest",
    "CreateNotificationRequest",
    "CreateTaskRequest",
    "CreateTemplateRequest",
    "CreateUserRequest",
    "CreateWorkflowRequest",
    "DashboardStatsResponse",
    "DepartmentResponse",
    "EmployeeResponse",
    "ErrorResponse",
    "FieldErrorDTO",
    "MarkAllReadRequest",
    "NotificationResponse",
    "PatchModel",
    "SeedResponse",
    "TaskResponse",
    "TemplateDetailResponse",
    "TemplateResponse",
    "TemplateStepInput",
    "TemplateStepResponse",
    "UpdateDepartmentRequest",
    "UpdateEmployeeRequest",
    "UpdateTaskRequest",
    "UpdateTemplateRequest",
    "UpdateUserRequest",
    "UpdateWorkflowRequest",
    "UpdateWorkflowStepRequest",
    "UserResponse",
    "WorkflowDetailResponse",
    "WorkflowMetricsResponse",
    "WorkflowResponse",
    "WorkflowStepResponse",
]
