"""领域值对象

ORM 模型、DTO 和领域服务共用的状态与角色枚举。
"""

from src.domain.value_objects.employee_status import EmployeeStatus
from src.domain.value_objects.step_status import StepStatus
from src.domain.value_objects.task_status import TaskStatus
from src.domain.value_objects.template_status import TemplateStatus
from src.domain.value_objects.user_role import UserRole
from src.domain.value_objects.workflow_status import WorkflowStatus
from src.domain.value_objects.workflow_type import WorkflowType

__all__ = [
    "EmployeeStatus",
    "StepStatus",
    "TaskStatus",
    "TemplateStatus",
    "UserRole",
    "WorkflowStatus",
    "WorkflowType",
]
