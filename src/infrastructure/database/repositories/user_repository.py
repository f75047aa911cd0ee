"""SQLAlchemy User Repository 实现"""

from sqlalchemy import select

from src.infrastructure.database.models import UserModel
from src.infrastructure.database.repositories.base_repository import SQLAlchemyCrudRepository


class SQLAlchemyUserRepository(SQLAlchemyCrudRepository[UserModel]):
    """用户按 first_name 排序

    记录中包含密码哈希，由 API 层在响应前去掉。
    """

    model = UserModel
    order_by = (UserModel.first_name,)
    filterable = frozenset({"role", "department_id", "is_active"})

    async def get_by_email(self, email: str) -> UserModel | None:
        result = await self.session.execute(select(UserModel).where(UserModel.email == email))
        return result.scalars().first()

    async def get_by_username(self, username: str) -> UserModel | None:
        result = await self.session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        return result.scalars().first()
