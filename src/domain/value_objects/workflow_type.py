"""WorkflowType 枚举 - JML 的三类人员变动（入职 / 调岗 / 离职）"""

from enum import Enum


class WorkflowType(str, Enum):
    JOINER = "joiner"
    MOVER = "mover"
    LEAVER = "leaver"
