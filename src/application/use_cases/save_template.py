"""工作流模板用例

- CreateTemplateUseCase: 先插入模板，再插入内嵌的步骤
- UpdateTemplateUseCase: 局部更新；传入步骤列表时整体替换
  （全部删除再全部插入，不做 diff）
- DeleteTemplateUseCase: 先删步骤，再删模板

已有工作流保留克隆时的步骤；这些操作都不会修改 workflow_steps。
"""


import logging
from dataclasses import dataclass, field
from typing import Any

from src.application.services.audit_recorder import AuditRecorder
from src.domain.exceptions import NotFoundError
from src.domain.ports.template_repository import (
    TemplateRecord,
    TemplateRepository,
    TemplateStepRecord,
    TemplateStepRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class TemplateWithSteps:
    template: TemplateRecord
    steps: list[TemplateStepRecord] = field(default_factory=list)


@dataclass
class CreateTemplateInput:
    values: dict[str, Any]
    steps: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class UpdateTemplateInput:
    template_id: str
    values: dict[str, Any]
    steps: list[dict[str, Any]] | None = None  # None 表示不修改步骤


class _TemplateUseCase:
    def __init__(
        self,
        template_repository: TemplateRepository,
        template_step_repository: TemplateStepRepository,
        audit_recorder: AuditRecorder,
    ):
        self.template_repository = template_repository
        self.template_step_repository = template_step_repository
        self.audit_recorder = audit_recorder

    async def _insert_steps(
        self, template_id: str, steps: list[dict[str, Any]]
    ) -> list[TemplateStepRecord]:
        created = []
        for step in steps:
            created.append(
                await self.template_step_repository.create({**step, "template_id": template_id})
            )
        created.sort(key=lambda s: s.step_order)
        return created


class CreateTemplateUseCase(_TemplateUseCase):
    async def execute(self, input_data: CreateTemplateInput) -> TemplateWithSteps:
        template = await self.template_repository.create(dict(input_data.values))
        steps = await self._insert_steps(template.id, input_data.steps)

        await self.audit_recorder.created("template", template.id, template.name)
        return TemplateWithSteps(template=template, steps=steps)


class UpdateTemplateUseCase(_TemplateUseCase):
    async def execute(self, input_data: UpdateTemplateInput) -> TemplateWithSteps:
        """更新模板，并按需替换其步骤

        异常：
            NotFoundError: 模板不存在（不会触碰步骤）
        """
        template = await self.template_repository.update(
            input_data.template_id, dict(input_data.values)
        )
        if template is None:
            raise NotFoundError("Template", input_data.template_id)

        if input_data.steps is not None:
            await self.template_step_repository.delete_for_template(template.id)
            steps = await self._insert_steps(template.id, input_data.steps)
            logger.info("已替换模板 %s 的步骤（共 %d 个）", template.id, len(steps))
        else:
            steps = await self.template_step_repository.list_for_template(template.id)

        await self.audit_recorder.updated("template", template.id, template.name)
        return TemplateWithSteps(template=template, steps=steps)


class DeleteTemplateUseCase(_TemplateUseCase):
    async def execute(self, template_id: str) -> None:
        await self.template_step_repository.delete_for_template(template_id)
        await self.template_repository.delete(template_id)
        await self.audit_recorder.deleted("template", template_id)
