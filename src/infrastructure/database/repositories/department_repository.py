"""SQLAlchemy Department Repository 实现"""

from src.infrastructure.database.models import DepartmentModel
from src.infrastructure.database.repositories.base_repository import SQLAlchemyCrudRepository


class SQLAlchemyDepartmentRepository(SQLAlchemyCrudRepository[DepartmentModel]):
    model = DepartmentModel
    order_by = (DepartmentModel.name,)
    filterable = frozenset({"parent_department_id", "manager_id"})
