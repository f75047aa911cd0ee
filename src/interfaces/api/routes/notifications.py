"""Notifications 路由

- GET   /api/notifications?userId=          - 用户最近的通知
- POST  /api/notifications                  - 创建通知
- PATCH /api/notifications/{id}/read        - 标记单条已读
- POST  /api/notifications/mark-all-read    - 标记用户的全部未读通知为已读
"""


from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.infrastructure.database.repositories import SQLAlchemyNotificationRepository
from src.interfaces.api.dependencies.repositories import get_notification_repository
from src.interfaces.api.dto import (
    CreateNotificationRequest,
    MarkAllReadRequest,
    NotificationResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    user_id: str | None = Query(default=None, alias="userId"),
    repository: SQLAlchemyNotificationRepository = Depends(get_notification_repository),
) -> list[NotificationResponse]:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="userId required")
    notifications = await repository.list_for_user(user_id)
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    request: CreateNotificationRequest,
    repository: SQLAlchemyNotificationRepository = Depends(get_notification_repository),
) -> NotificationResponse:
    notification = await repository.create(request.to_values())
    return NotificationResponse.model_validate(notification)


@router.patch("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: str,
    repository: SQLAlchemyNotificationRepository = Depends(get_notification_repository),
) -> NotificationResponse:
    notification = await repository.mark_read(notification_id)
    if notification is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found"
        )
    return NotificationResponse.model_validate(notification)


@router.post("/mark-all-read")
async def mark_all_notifications_read(
    request: MarkAllReadRequest,
    repository: SQLAlchemyNotificationRepository = Depends(get_notification_repository),
) -> dict[str, bool]:
    await repository.mark_all_read(request.user_id)
    return {"success": True}
