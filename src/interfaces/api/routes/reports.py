"""仪表盘 / 报表路由

- GET /api/dashboard/stats                          - 仪表盘计数
- GET /api/reports/workflows?startDate=&endDate=    - 工作流指标
"""


from datetime import datetime

from fastapi import APIRouter, Depends, Query

from src.infrastructure.database.repositories import SQLAlchemyReportingRepository
from src.interfaces.api.dependencies.repositories import get_reporting_repository
from src.interfaces.api.dto import DashboardStatsResponse, WorkflowMetricsResponse

router = APIRouter(tags=["reports"])


@router.get("/dashboard/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(
    repository: SQLAlchemyReportingRepository = Depends(get_reporting_repository),
) -> DashboardStatsResponse:
    return DashboardStatsResponse.model_validate(await repository.dashboard_stats())


@router.get("/reports/workflows", response_model=WorkflowMetricsResponse)
async def workflow_report(
    start_date: datetime | None = Query(default=None, alias="startDate"),
    end_date: datetime | None = Query(default=None, alias="endDate"),
    repository: SQLAlchemyReportingRepository = Depends(get_reporting_repository),
) -> WorkflowMetricsResponse:
    """创建时间在 [startDate, endDate] 内的工作流指标

    日期为 ISO 8601 格式（"2024-01-31" 或 "2024-01-31T00:00:00Z"）。
    """
    metrics = await repository.workflow_metrics(start_date, end_date)
    return WorkflowMetricsResponse.model_validate(metrics)
