"""SQLAlchemy Notification Repository 实现"""

from datetime import UTC, datetime

from sqlalchemy import select, update

from src.config import settings
from src.infrastructure.database.models import NotificationModel
from src.infrastructure.database.repositories.base_repository import SQLAlchemyCrudRepository


class SQLAlchemyNotificationRepository(SQLAlchemyCrudRepository[NotificationModel]):
    model = NotificationModel
    order_by = (NotificationModel.created_at.desc(),)
    filterable = frozenset({"user_id", "is_read", "type"})

    async def list_for_user(self, user_id: str) -> list[NotificationModel]:
        """某个用户最近的通知，最新的在前"""
        stmt = (
            select(NotificationModel)
            .where(NotificationModel.user_id == user_id)
            .order_by(*self.order_by)
            .limit(settings.notification_limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def mark_read(self, notification_id: str) -> NotificationModel | None:
        return await self.update(
            notification_id, {"is_read": True, "read_at": datetime.now(UTC)}
        )

    async def mark_all_read(self, user_id: str) -> bool:
        """把用户的所有未读通知标记为已读"""
        await self.session.execute(
            update(NotificationModel)
            .where(NotificationModel.user_id == user_id, NotificationModel.is_read.is_(False))
            .values(is_read=True, read_at=datetime.now(UTC))
        )
        await self.session.commit()
        return True
