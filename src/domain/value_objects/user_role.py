"""UserRole 值对象

角色决定模板步骤分派给谁。当前没有任何端点按角色做权限校验。
"""

from enum import Enum


class UserRole(str, Enum):
    """用户角色（按权限从高到低排列）"""

    ADMIN = "admin"
    HR_MANAGER = "hr_manager"
    IT_ADMIN = "it_admin"
    MANAGER = "manager"
    VIEWER = "viewer"
