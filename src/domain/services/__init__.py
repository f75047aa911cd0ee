"""领域服务

- workflow_progress: JML 工作流的进度聚合规则
"""

from src.domain.services.workflow_progress import (
    ProgressUpdate,
    calculate_progress,
    plan_progress_update,
    triggers_aggregation,
)

__all__ = [
    "ProgressUpdate",
    "calculate_progress",
    "plan_progress_update",
    "triggers_aggregation",
]
