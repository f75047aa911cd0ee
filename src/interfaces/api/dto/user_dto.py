"""User DTO

password 只写不读：创建时必填，更新时可选，UserResponse 中没有
password 字段，所以它永远不会从 API 返回。
"""


from datetime import datetime

from pydantic import EmailStr, Field

from src.domain.value_objects.user_role import UserRole
from src.interfaces.api.dto.common import CamelModel, NonNull, PatchModel


class CreateUserRequest(CamelModel):
    """创建用户请求

    示例：
        {"email": "jane@company.com", "username": "jane", "password": "s3cret",
         "firstName": "Jane", "lastName": "Smith", "role": "hr_manager"}
    """

    email: EmailStr = Field(..., description="邮箱（唯一）")
    username: str = Field(..., min_length=1, max_length=100, description="登录名（唯一）")
    password: str = Field(..., min_length=1, description="明文密码，以 bcrypt 哈希存储")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = Field(default=UserRole.VIEWER)
    department_id: str | None = None
    avatar_url: str | None = None
    is_active: bool = True


class UpdateUserRequest(PatchModel):
    email: NonNull[EmailStr] = None
    username: NonNull[str] = None
    password: NonNull[str] = Field(
        default=None, min_length=1, description="新的明文密码（重新哈希）"
    )
    first_name: NonNull[str] = None
    last_name: NonNull[str] = None
    role: NonNull[UserRole] = None
    department_id: str | None = None
    avatar_url: str | None = None
    is_active: NonNull[bool] = None


class UserResponse(CamelModel):
    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    role: str
    department_id: str | None = None
    avatar_url: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
