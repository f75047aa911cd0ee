"""SQLAlchemy Employee Repository 实现

除了等值过滤的 list，员工还支持全文搜索：在 first_name、last_name、email、
job_title 上做不区分大小写的子串匹配。查询中的 "%" 和 "_" 按字面匹配。
"""

from sqlalchemy import or_, select

from src.infrastructure.database.models import EmployeeModel
from src.infrastructure.database.repositories.base_repository import SQLAlchemyCrudRepository


class SQLAlchemyEmployeeRepository(SQLAlchemyCrudRepository[EmployeeModel]):
    model = EmployeeModel
    order_by = (EmployeeModel.created_at.desc(),)
    filterable = frozenset({"status", "department_id", "manager_id"})

    async def search(self, query: str) -> list[EmployeeModel]:
        stmt = (
            select(EmployeeModel)
            .where(
                or_(
                    EmployeeModel.first_name.icontains(query, autoescape=True),
                    EmployeeModel.last_name.icontains(query, autoescape=True),
                    EmployeeModel.email.icontains(query, autoescape=True),
                    EmployeeModel.job_title.icontains(query, autoescape=True),
                )
            )
            .order_by(EmployeeModel.first_name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
