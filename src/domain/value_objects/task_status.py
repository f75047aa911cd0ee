"""TaskStatus 枚举 - 细粒度任务的状态"""

from enum import Enum


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"

    @classmethod
    def open_values(cls) -> list[str]:
        """仍需处理的任务状态（pending / in_progress）"""
        return [cls.PENDING.value, cls.IN_PROGRESS.value]
