"""领域层异常

API 层负责把它们转换为 HTTP 响应：

- ValidationError -> 400，附带字段级错误
- NotFoundError   -> 404
- DomainError     -> 400
"""

from dataclasses import dataclass


class DomainError(Exception):
    """业务规则违反的基类"""

    pass


class NotFoundError(DomainError):
    """引用的实体不存在

    参数：
        entity_type: 实体名称（"Workflow"、"Template" 等）
        entity_id: 查找的 id
    """

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found: {entity_id}")


@dataclass(frozen=True)
class FieldError:
    """请求数据中的一个非法字段"""

    field: str
    message: str
    type: str = "value_error"

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "type": self.type}


class ValidationError(DomainError):
    """请求数据违反了 schema 校验无法表达的规则

    例如：用户邮箱已被注册。
    """

    def __init__(self, errors: list[FieldError], message: str = "Invalid request data"):
        self.errors = errors
        self.message = message
        super().__init__(message)
