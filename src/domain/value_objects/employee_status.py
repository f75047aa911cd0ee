"""EmployeeStatus 枚举 - 员工在 JML 生命周期中的位置"""

from enum import Enum


class EmployeeStatus(str, Enum):
    """员工生命周期状态

    JOINING -> ACTIVE -> (MOVING -> ACTIVE)* -> LEAVING -> DEPARTED
    """

    JOINING = "joining"
    ACTIVE = "active"
    MOVING = "moving"
    LEAVING = "leaving"
    DEPARTED = "departed"
