"""Department DTO"""

from datetime import datetime

from pydantic import Field

from src.interfaces.api.dto.common import CamelModel, NonNull, PatchModel


class CreateDepartmentRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255, description="部门名称")
    description: str | None = None
    manager_id: str | None = None
    parent_department_id: str | None = None


class UpdateDepartmentRequest(PatchModel):
    name: NonNull[str] = None
    description: str | None = None
    manager_id: str | None = None
    parent_department_id: str | None = None


class DepartmentResponse(CamelModel):
    id: str
    name: str
    description: str | None = None
    manager_id: str | None = None
    parent_department_id: str | None = None
    created_at: datetime
    updated_at: datetime
