"""WorkflowStatus 枚举 - 运行中 JML 工作流的生命周期"""

from enum import Enum


class WorkflowStatus(str, Enum):
    """工作流状态

    - PENDING: 已创建，还没有完成的步骤
    - IN_PROGRESS: 至少一个步骤已完成
    - COMPLETED: 所有步骤已完成（progress == 100）
    - BLOCKED: 被外部问题阻塞，手动设置
    - CANCELLED: 已放弃，手动设置
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"
    CANCELLED = "cancelled"

    @classmethod
    def active_values(cls) -> list[str]:
        """仪表盘上计为"活跃"的状态"""
        return [cls.PENDING.value, cls.IN_PROGRESS.value]
