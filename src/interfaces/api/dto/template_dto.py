"""工作流模板 / 模板步骤 DTO

模板和它的步骤一起创建：

    POST /api/templates
    {"name": "Standard New Hire Onboarding", "type": "joiner",
     "steps": [{"name": "IT Equipment Setup", "stepOrder": 1, "assigneeRole": "it_admin"}]}

PATCH 时传入的 "steps" 数组会整体替换步骤集合。
"""


from datetime import datetime
from typing import Any

from pydantic import Field

from src.domain.value_objects.template_status import TemplateStatus
from src.domain.value_objects.user_role import UserRole
from src.domain.value_objects.workflow_type import WorkflowType
from src.interfaces.api.dto.common import CamelModel, MetadataField, NonNull, PatchModel


class TemplateStepInput(CamelModel):
    """模板中的一个步骤（不含 template_id）"""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    step_order: int = Field(..., ge=0, description="步骤顺序（升序）")
    assignee_role: UserRole | None = None
    assignee_id: str | None = None
    sla_minutes: int | None = Field(default=None, ge=0)
    is_required: bool = True
    automation_config: dict[str, Any] | None = None
    meta: dict[str, Any] | None = MetadataField()


class CreateTemplateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    type: WorkflowType
    status: TemplateStatus = TemplateStatus.DRAFT
    version: int = Field(default=1, ge=1)
    is_default: bool = False
    estimated_days: int | None = Field(default=None, ge=0)
    meta: dict[str, Any] | None = MetadataField()
    created_by: str | None = None
    steps: list[TemplateStepInput] = Field(default_factory=list)

    def to_values(self) -> dict[str, Any]:
        return self.model_dump(exclude={"steps"})

    def step_values(self) -> list[dict[str, Any]]:
        return [step.to_values() for step in self.steps]


class UpdateTemplateRequest(PatchModel):
    name: NonNull[str] = None
    description: str | None = None
    type: NonNull[WorkflowType] = None
    status: NonNull[TemplateStatus] = None
    version: NonNull[int] = None
    is_default: NonNull[bool] = None
    estimated_days: int | None = None
    meta: dict[str, Any] | None = MetadataField()
    created_by: str | None = None
    steps: list[TemplateStepInput] | None = Field(
        default=None, description="传入时整体替换现有步骤"
    )

    def to_values(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude={"steps"})

    def step_values(self) -> list[dict[str, Any]] | None:
        if self.steps is None:
            return None
        return [step.to_values() for step in self.steps]


class TemplateStepResponse(CamelModel):
    id: str
    template_id: str
    name: str
    description: str | None = None
    step_order: int
    assignee_role: str | None = None
    assignee_id: str | None = None
    sla_minutes: int | None = None
    is_required: bool
    automation_config: dict[str, Any] | None = None
    meta: dict[str, Any] | None = MetadataField()
    created_at: datetime


class TemplateResponse(CamelModel):
    id: str
    name: str
    description: str | None = None
    type: str
    status: str
    version: int
    is_default: bool
    estimated_days: int | None = None
    meta: dict[str, Any] | None = MetadataField()
    created_by: str | None = None
    created_at: datetime
    updated_at: datetime


class TemplateDetailResponse(TemplateResponse):
    """模板及其按 stepOrder 排序的步骤"""

    steps: list[TemplateStepResponse] = Field(default_factory=list)

    @classmethod
    def from_parts(cls, template: Any, steps: list[Any]) -> "TemplateDetailResponse":
        base = TemplateResponse.model_validate(template)
        return cls(
            **base.model_dump(),
            steps=[TemplateStepResponse.model_validate(step) for step in steps],
        )
