"""工作流进度聚合

业务规则：
- 工作流进度 = 状态为 "completed" 的步骤占比，取整数百分比（四舍五入）
- 只有步骤变为 "completed" 时才重新计算；其他变化
  （blocked、skipped、退回 pending）不会触碰工作流
- 达到 100 时工作流变为 "completed" 并记录完成时间；大于 0 时变为
  "in_progress"。这里从不把状态改回 "pending"

为什么是纯函数？
- 只计算"该写什么"，由调用方负责写入，便于单元测试
"""


from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from src.domain.value_objects.step_status import StepStatus
from src.domain.value_objects.workflow_status import WorkflowStatus


@dataclass(frozen=True)
class ProgressUpdate:
    """步骤完成后需要写回父工作流的字段"""

    progress: int
    status: WorkflowStatus | None = None
    completed_at: datetime | None = None

    def to_values(self) -> dict:
        """局部更新工作流时使用的列值"""
        values: dict = {"progress": self.progress}
        if self.status is not None:
            values["status"] = self.status.value
        if self.completed_at is not None:
            values["completed_at"] = self.completed_at
        return values


def calculate_progress(step_statuses: Iterable[str]) -> int | None:
    """整数完成百分比；没有步骤时返回 None

    用整数运算做四舍五入：1/8（12.5%）得 13，2/3（66.67%）得 67。
    """
    statuses = list(step_statuses)
    total = len(statuses)
    if total == 0:
        return None

    completed = sum(1 for status in statuses if status == StepStatus.COMPLETED.value)
    return (200 * completed + total) // (2 * total)


def triggers_aggregation(new_status: str | None) -> bool:
    """只有变为 "completed" 才会重新计算工作流"""
    return new_status == StepStatus.COMPLETED.value


def plan_progress_update(
    step_statuses: Iterable[str],
    now: datetime | None = None,
) -> ProgressUpdate | None:
    """根据当前步骤集合决定工作流的更新内容

    参数：
        step_statuses: 工作流全部步骤的状态（包含刚更新的那一步）
        now: 进度达到 100 时写入的完成时间

    返回：
        ProgressUpdate；工作流没有步骤时返回 None（完全跳过更新）
    """
    progress = calculate_progress(step_statuses)
    if progress is None:
        return None

    if progress == 100:
        return ProgressUpdate(
            progress=progress,
            status=WorkflowStatus.COMPLETED,
            completed_at=now or datetime.now(UTC),
        )
    if progress > 0:
        return ProgressUpdate(progress=progress, status=WorkflowStatus.IN_PROGRESS)
    return ProgressUpdate(progress=progress)
