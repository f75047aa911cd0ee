"""Notification DTO"""

from datetime import datetime

from pydantic import Field

from src.interfaces.api.dto.common import CamelModel


class CreateNotificationRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    type: str = "info"
    related_entity_type: str | None = None
    related_entity_id: str | None = None
    is_read: bool = False


class MarkAllReadRequest(CamelModel):
    user_id: str = Field(..., min_length=1)


class NotificationResponse(CamelModel):
    id: str
    user_id: str
    title: str
    message: str
    type: str
    related_entity_type: str | None = None
    related_entity_id: str | None = None
    is_read: bool
    read_at: datetime | None = None
    created_at: datetime
