"""Task DTO"""

from datetime import datetime
from typing import Any

from pydantic import Field

from src.domain.value_objects.task_status import TaskStatus
from src.interfaces.api.dto.common import CamelModel, MetadataField, NonNull, PatchModel


class CreateTaskRequest(CamelModel):
    workflow_step_id: str = Field(..., min_length=1)
    workflow_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    assignee_id: str | None = None
    priority: str | None = "medium"
    due_date: datetime | None = None
    completed_at: datetime | None = None
    completed_by: str | None = None
    meta: dict[str, Any] | None = MetadataField()


class UpdateTaskRequest(PatchModel):
    title: NonNull[str] = None
    description: str | None = None
    status: NonNull[TaskStatus] = None
    assignee_id: str | None = None
    priority: str | None = None
    due_date: datetime | None = None
    completed_at: datetime | None = None
    completed_by: str | None = None
    meta: dict[str, Any] | None = MetadataField()


class TaskResponse(CamelModel):
    id: str
    workflow_step_id: str
    workflow_id: str
    title: str
    description: str | None = None
    status: str
    assignee_id: str | None = None
    priority: str | None = None
    due_date: datetime | None = None
    completed_at: datetime | None = None
    completed_by: str | None = None
    meta: dict[str, Any] | None = MetadataField()
    created_at: datetime
    updated_at: datetime
