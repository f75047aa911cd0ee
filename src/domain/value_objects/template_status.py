"""TemplateStatus 枚举 - 工作流模板的发布状态"""

from enum import Enum


class TemplateStatus(str, Enum):
    """模板状态

    DRAFT（编辑中）-> ACTIVE（可使用）-> ARCHIVED（归档，仅保留历史）
    """

    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"
