"""Template 端口 - 模板及模板步骤的持久化契约"""

from typing import Protocol

from src.domain.ports.crud_repository import CrudRepository


class TemplateRecord(Protocol):
    id: str
    name: str
    type: str
    status: str


class TemplateStepRecord(Protocol):
    id: str
    template_id: str
    name: str
    description: str | None
    step_order: int
    assignee_id: str | None


class TemplateRepository(CrudRepository[TemplateRecord], Protocol):
    pass


class TemplateStepRepository(CrudRepository[TemplateStepRecord], Protocol):
    async def list_for_template(self, template_id: str) -> list[TemplateStepRecord]:
        """模板的全部步骤，按 step_order 升序"""
        ...

    async def delete_for_template(self, template_id: str) -> bool:
        """删除模板的全部步骤"""
        ...
