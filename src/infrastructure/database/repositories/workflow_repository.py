"""SQLAlchemy Workflow / WorkflowStep Repository 实现

删除工作流不会删除它的步骤和任务。
"""

from sqlalchemy import select

from src.infrastructure.database.models import WorkflowModel, WorkflowStepModel
from src.infrastructure.database.repositories.base_repository import SQLAlchemyCrudRepository


class SQLAlchemyWorkflowRepository(SQLAlchemyCrudRepository[WorkflowModel]):
    model = WorkflowModel
    order_by = (WorkflowModel.created_at.desc(),)
    filterable = frozenset({"status", "type", "employee_id", "assigned_to", "template_id"})


class SQLAlchemyWorkflowStepRepository(SQLAlchemyCrudRepository[WorkflowStepModel]):
    model = WorkflowStepModel
    order_by = (WorkflowStepModel.step_order,)
    filterable = frozenset({"workflow_id", "status", "assignee_id"})

    async def list_for_workflow(self, workflow_id: str) -> list[WorkflowStepModel]:
        stmt = (
            select(WorkflowStepModel)
            .where(WorkflowStepModel.workflow_id == workflow_id)
            .order_by(WorkflowStepModel.step_order)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
