"""Workflow / WorkflowStep DTO"""

from datetime import datetime
from typing import Any

from pydantic import Field

from src.domain.value_objects.step_status import StepStatus
from src.domain.value_objects.workflow_status import WorkflowStatus
from src.domain.value_objects.workflow_type import WorkflowType
from src.interfaces.api.dto.common import CamelModel, MetadataField, NonNull, PatchModel
from src.interfaces.api.dto.employee_dto import EmployeeResponse


class CreateWorkflowRequest(CamelModel):
    """创建工作流请求

    请求体中没有步骤：步骤从模板克隆。
    """

    template_id: str = Field(..., min_length=1)
    employee_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    type: WorkflowType
    status: WorkflowStatus = WorkflowStatus.PENDING
    initiated_by: str = Field(..., min_length=1, description="发起工作流的用户")
    assigned_to: str | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    progress: int = Field(default=0, ge=0, le=100)
    meta: dict[str, Any] | None = MetadataField()


class UpdateWorkflowRequest(PatchModel):
    name: NonNull[str] = None
    type: NonNull[WorkflowType] = None
    status: NonNull[WorkflowStatus] = None
    assigned_to: str | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    completed_at: datetime | None = None
    progress: NonNull[int] = Field(default=None, ge=0, le=100)
    meta: dict[str, Any] | None = MetadataField()


class UpdateWorkflowStepRequest(PatchModel):
    """步骤局部更新。status 设为 "completed" 时重新计算工作流进度"""

    name: NonNull[str] = None
    description: str | None = None
    step_order: NonNull[int] = None
    status: NonNull[StepStatus] = None
    assignee_id: str | None = None
    due_date: datetime | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    completed_by: str | None = None
    notes: str | None = None
    meta: dict[str, Any] | None = MetadataField()


class WorkflowStepResponse(CamelModel):
    id: str
    workflow_id: str
    template_step_id: str | None = None
    name: str
    description: str | None = None
    step_order: int
    status: str
    assignee_id: str | None = None
    due_date: datetime | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    completed_by: str | None = None
    notes: str | None = None
    meta: dict[str, Any] | None = MetadataField()
    created_at: datetime
    updated_at: datetime


class WorkflowResponse(CamelModel):
    id: str
    template_id: str
    employee_id: str
    name: str
    type: str
    status: str
    initiated_by: str
    assigned_to: str | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    completed_at: datetime | None = None
    progress: int
    meta: dict[str, Any] | None = MetadataField()
    created_at: datetime
    updated_at: datetime


class WorkflowDetailResponse(WorkflowResponse):
    """工作流及其有序步骤和所属员工"""

    steps: list[WorkflowStepResponse] = Field(default_factory=list)
    employee: EmployeeResponse | None = None

    @classmethod
    def from_parts(
        cls, workflow: Any, steps: list[Any], employee: Any | None
    ) -> "WorkflowDetailResponse":
        base = WorkflowResponse.model_validate(workflow)
        return cls(
            **base.model_dump(),
            steps=[WorkflowStepResponse.model_validate(step) for step in steps],
            employee=EmployeeResponse.model_validate(employee) if employee else None,
        )
