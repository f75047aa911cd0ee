"""SQLAlchemy AuditLog Repository 实现 - 只追加，最新的在前，有条数上限"""

from typing import Any

from sqlalchemy import select

from src.config import settings
from src.infrastructure.database.models import AuditLogModel
from src.infrastructure.database.repositories.base_repository import SQLAlchemyCrudRepository


class SQLAlchemyAuditLogRepository(SQLAlchemyCrudRepository[AuditLogModel]):
    model = AuditLogModel
    order_by = (AuditLogModel.created_at.desc(),)
    filterable = frozenset({"entity_type", "entity_id", "user_id", "action"})

    async def list(self, **filters: Any) -> list[AuditLogModel]:
        stmt = (
            select(AuditLogModel)
            .where(*self._equality_conditions(filters))
            .order_by(*self.order_by)
            .limit(settings.audit_log_limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
