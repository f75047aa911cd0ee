"""SQLAlchemy Task Repository 实现"""

from sqlalchemy import select

from src.domain.value_objects.task_status import TaskStatus
from src.infrastructure.database.models import TaskModel
from src.infrastructure.database.repositories.base_repository import SQLAlchemyCrudRepository


class SQLAlchemyTaskRepository(SQLAlchemyCrudRepository[TaskModel]):
    model = TaskModel
    order_by = (TaskModel.created_at.desc(),)
    filterable = frozenset({"workflow_id", "workflow_step_id", "assignee_id", "status"})

    async def list_pending(self, user_id: str | None = None) -> list[TaskModel]:
        """待处理的任务（pending 或 in_progress），截止时间最早的在前

        参数：
            user_id: 只返回分配给该用户的任务
        """
        stmt = select(TaskModel).where(TaskModel.status.in_(TaskStatus.open_values()))
        if user_id:
            stmt = stmt.where(TaskModel.assignee_id == user_id)
        stmt = stmt.order_by(TaskModel.due_date.asc().nulls_last(), TaskModel.created_at)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
