"""SQLAlchemy 报表查询 - 仪表盘和报表页

只读的聚合计数，这里不做任何写入。
"""


from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.value_objects.employee_status import EmployeeStatus
from src.domain.value_objects.task_status import TaskStatus
from src.domain.value_objects.workflow_status import WorkflowStatus
from src.infrastructure.database.models import EmployeeModel, TaskModel, WorkflowModel
from src.infrastructure.database.repositories.base_repository import as_utc


@dataclass
class DashboardStats:
    active_workflows: int = 0
    pending_tasks: int = 0
    completed_this_week: int = 0
    joining_count: int = 0
    moving_count: int = 0
    leaving_count: int = 0


@dataclass
class TypeCount:
    type: str
    count: int


@dataclass
class StatusCount:
    status: str
    count: int


@dataclass
class WorkflowMetrics:
    total_workflows: int = 0
    completed_workflows: int = 0
    avg_completion_days: float | None = None
    by_type: list[TypeCount] = field(default_factory=list)
    by_status: list[StatusCount] = field(default_factory=list)


class SQLAlchemyReportingRepository:
    """工作流、任务、员工上的聚合查询"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def dashboard_stats(self, now: datetime | None = None) -> DashboardStats:
        """仪表盘上的计数

        - active_workflows: pending 或 in_progress 的工作流
        - pending_tasks: pending 或 in_progress 的任务
        - completed_this_week: 最近 7 天内完成的工作流
        - joining/moving/leaving_count: 各生命周期状态的员工数
        """
        one_week_ago = as_utc(now or datetime.now(UTC)) - timedelta(days=7)

        return DashboardStats(
            active_workflows=await self._count(
                WorkflowModel, WorkflowModel.status.in_(WorkflowStatus.active_values())
            ),
            pending_tasks=await self._count(
                TaskModel, TaskModel.status.in_(TaskStatus.open_values())
            ),
            completed_this_week=await self._count(
                WorkflowModel,
                WorkflowModel.status == WorkflowStatus.COMPLETED.value,
                WorkflowModel.completed_at >= one_week_ago,
            ),
            joining_count=await self._count(
                EmployeeModel, EmployeeModel.status == EmployeeStatus.JOINING.value
            ),
            moving_count=await self._count(
                EmployeeModel, EmployeeModel.status == EmployeeStatus.MOVING.value
            ),
            leaving_count=await self._count(
                EmployeeModel, EmployeeModel.status == EmployeeStatus.LEAVING.value
            ),
        )

    async def workflow_metrics(
        self,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> WorkflowMetrics:
        """统计创建时间在 [start_date, end_date] 内的工作流

        avg_completion_days 是已完成工作流 (completed_at - start_date) 的平均天数，
        start_date 为空时用 created_at；范围内没有已完成的工作流时为 None。
        """
        window: list[ColumnElement[bool]] = []
        if start_date is not None:
            window.append(WorkflowModel.created_at >= as_utc(start_date))
        if end_date is not None:
            window.append(WorkflowModel.created_at <= as_utc(end_date))

        total = await self._count(WorkflowModel, *window)
        completed = await self._count(
            WorkflowModel, *window, WorkflowModel.status == WorkflowStatus.COMPLETED.value
        )

        by_type_rows = await self.session.execute(
            select(WorkflowModel.type, func.count())
            .where(*window)
            .group_by(WorkflowModel.type)
            .order_by(WorkflowModel.type)
        )
        by_status_rows = await self.session.execute(
            select(WorkflowModel.status, func.count())
            .where(*window)
            .group_by(WorkflowModel.status)
            .order_by(WorkflowModel.status)
        )

        return WorkflowMetrics(
            total_workflows=total,
            completed_workflows=completed,
            avg_completion_days=await self._avg_completion_days(window),
            by_type=[TypeCount(type=row[0], count=int(row[1])) for row in by_type_rows],
            by_status=[StatusCount(status=row[0], count=int(row[1])) for row in by_status_rows],
        )

    async def _count(self, model: type, *conditions: ColumnElement[bool]) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(model).where(*conditions)
        )
        return int(result.scalar_one() or 0)

    async def _avg_completion_days(self, window: list[ColumnElement[bool]]) -> float | None:
        result = await self.session.execute(
            select(
                WorkflowModel.start_date, WorkflowModel.created_at, WorkflowModel.completed_at
            ).where(
                *window,
                WorkflowModel.status == WorkflowStatus.COMPLETED.value,
                WorkflowModel.completed_at.is_not(None),
            )
        )

        durations = []
        for start_date, created_at, completed_at in result:
            started = _as_naive_utc(start_date or created_at)
            durations.append((_as_naive_utc(completed_at) - started).total_seconds() / 86400)

        if not durations:
            return None
        return round(sum(durations) / len(durations), 1)


def _as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value
