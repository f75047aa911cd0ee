"""SQLAlchemy WorkflowTemplate / TemplateStep Repository 实现

删除模板不会触碰步骤；调用方需先用 delete_for_template() 删除步骤。
"""

from sqlalchemy import delete, select

from src.infrastructure.database.models import TemplateStepModel, WorkflowTemplateModel
from src.infrastructure.database.repositories.base_repository import SQLAlchemyCrudRepository


class SQLAlchemyTemplateRepository(SQLAlchemyCrudRepository[WorkflowTemplateModel]):
    model = WorkflowTemplateModel
    order_by = (WorkflowTemplateModel.created_at.desc(),)
    filterable = frozenset({"type", "status", "is_default"})


class SQLAlchemyTemplateStepRepository(SQLAlchemyCrudRepository[TemplateStepModel]):
    model = TemplateStepModel
    order_by = (TemplateStepModel.step_order,)
    filterable = frozenset({"template_id", "assignee_role"})

    async def list_for_template(self, template_id: str) -> list[TemplateStepModel]:
        stmt = (
            select(TemplateStepModel)
            .where(TemplateStepModel.template_id == template_id)
            .order_by(TemplateStepModel.step_order)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_for_template(self, template_id: str) -> bool:
        await self.session.execute(
            delete(TemplateStepModel).where(TemplateStepModel.template_id == template_id)
        )
        await self.session.commit()
        return True
