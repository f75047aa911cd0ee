"""仪表盘 / 报表 DTO

由 SQLAlchemyReportingRepository 返回的 dataclass 构建。
"""


from pydantic import Field

from src.interfaces.api.dto.common import CamelModel


class DashboardStatsResponse(CamelModel):
    active_workflows: int = Field(..., description="pending 或 in_progress 的工作流数")
    pending_tasks: int = Field(..., description="pending 或 in_progress 的任务数")
    completed_this_week: int = Field(..., description="最近 7 天完成的工作流数")
    joining_count: int
    moving_count: int
    leaving_count: int


class TypeCountDTO(CamelModel):
    type: str
    count: int


class StatusCountDTO(CamelModel):
    status: str
    count: int


class WorkflowMetricsResponse(CamelModel):
    total_workflows: int
    completed_workflows: int
    avg_completion_days: float | None = Field(
        default=None, description="从开始到完成的平均天数（保留一位小数）"
    )
    by_type: list[TypeCountDTO]
    by_status: list[StatusCountDTO]
