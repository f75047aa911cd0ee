"""Users 路由

定义用户相关的 API 端点：
- GET    /api/users        - 列出用户（按 first_name 排序）
- POST   /api/users        - 创建用户（密码哈希后存储）
- GET    /api/users/{id}   - 获取用户
- PATCH  /api/users/{id}   - 局部更新（密码重新哈希）
- DELETE /api/users/{id}   - 删除用户

为什么响应里永远没有密码哈希？
- 所有路由都用 UserResponse 响应，它没有 password 字段
"""


from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.application.services.audit_recorder import AuditRecorder
from src.domain.exceptions import FieldError, ValidationError
from src.infrastructure.auth.password_hasher import PasswordHasher
from src.infrastructure.database.repositories import SQLAlchemyUserRepository
from src.interfaces.api.dependencies.repositories import get_audit_recorder, get_user_repository
from src.interfaces.api.dto import CreateUserRequest, UpdateUserRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


async def _ensure_unique(
    repository: SQLAlchemyUserRepository,
    email: str | None,
    username: str | None,
    exclude_id: str | None = None,
) -> None:
    """邮箱或用户名已被其他用户占用时拒绝"""
    errors = []
    if email is not None:
        existing = await repository.get_by_email(email)
        if existing is not None and existing.id != exclude_id:
            errors.append(FieldError("email", "Email is already registered", "unique"))
    if username is not None:
        existing = await repository.get_by_username(username)
        if existing is not None and existing.id != exclude_id:
            errors.append(FieldError("username", "Username is already taken", "unique"))
    if errors:
        raise ValidationError(errors, message="Invalid user data")


@router.get("", response_model=list[UserResponse])
async def list_users(
    repository: SQLAlchemyUserRepository = Depends(get_user_repository),
) -> list[UserResponse]:
    users = await repository.list()
    return [UserResponse.model_validate(user) for user in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> UserResponse:
    """创建用户

    错误：
    - 400: 请求体非法，或邮箱 / 用户名已被占用
    """
    await _ensure_unique(repository, request.email, request.username)

    values = request.to_values()
    values["password"] = PasswordHasher.hash_password(request.password)
    user = await repository.create(values)

    await audit.created("user", user.id, user.email)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    repository: SQLAlchemyUserRepository = Depends(get_user_repository),
) -> UserResponse:
    user = await repository.get(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserResponse.model_validate(user)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> UserResponse:
    values = request.to_values()
    await _ensure_unique(
        repository, values.get("email"), values.get("username"), exclude_id=user_id
    )
    if "password" in values:
        values["password"] = PasswordHasher.hash_password(values["password"])

    user = await repository.update(user_id, values)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    await audit.updated("user", user.id, user.email)
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(
    user_id: str,
    repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> Response:
    await repository.delete(user_id)
    await audit.deleted("user", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
