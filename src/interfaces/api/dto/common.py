"""通用 DTO 组件

- CamelModel: 传输时使用 camelCase 键，Python 中使用 snake_case 属性。
  输入两种写法都接受；响应直接从 ORM 记录构建（from_attributes）
- MetadataField: JSON 列 "metadata"，ORM 中映射为 `meta`
- NonNull: PATCH 字段可以省略，但不能设为 null
- ErrorResponse / FieldErrorDTO: API 的错误响应体
"""


from typing import Annotated, Any, TypeVar

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        validate_default=True,
    )

    def to_values(self) -> dict[str, Any]:
        """以 ORM 属性名为键的列值"""
        return self.model_dump()


class PatchModel(CamelModel):
    """局部更新请求体：只写入客户端传了的字段"""

    model_config = ConfigDict(validate_default=False)

    def to_values(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


def MetadataField(description: str = "自由格式的 JSON 元数据") -> Any:  # noqa: N802
    return Field(
        default=None,
        validation_alias=AliasChoices("meta", "metadata"),
        serialization_alias="metadata",
        description=description,
    )


def _reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("Field may not be null")
    return value


NonNull = Annotated[T | None, BeforeValidator(_reject_null)]


class FieldErrorDTO(BaseModel):
    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """错误响应体：{"message": ..., "errors": [...]}（errors 只在 400 时出现）"""

    message: str = Field(..., description="可读的错误信息")
    errors: list[FieldErrorDTO] | None = Field(default=None, description="字段级错误")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Invalid request data",
                "errors": [{"field": "password", "message": "Field required", "type": "missing"}],
            }
        }
    )
