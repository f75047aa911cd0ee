"""SQLAlchemyCrudRepository 辅助方法单元测试（不连数据库）"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from src.infrastructure.database.repositories.base_repository import as_utc
from src.infrastructure.database.repositories.employee_repository import (
    SQLAlchemyEmployeeRepository,
)


class TestEqualityConditions:
    def test_none_filters_are_ignored(self):
        repository = SQLAlchemyEmployeeRepository(session=None)

        conditions = repository._equality_conditions({"status": "joining", "department_id": None})

        assert len(conditions) == 1

    def test_unknown_filter_raises(self):
        repository = SQLAlchemyEmployeeRepository(session=None)

        with pytest.raises(ValueError, match="cannot be filtered by 'email'"):
            repository._equality_conditions({"email": "ann@company.com"})


class TestAsUtc:
    def test_offset_datetime_is_converted(self):
        value = datetime(2026, 1, 1, tzinfo=timezone(timedelta(hours=5)))

        converted = as_utc(value)

        assert converted == value
        assert converted.tzinfo is UTC
        assert converted.replace(tzinfo=None) == datetime(2025, 12, 31, 19, 0)

    def test_naive_datetime_and_other_values_are_unchanged(self):
        naive = datetime(2026, 1, 1, 9, 30)

        assert as_utc(naive) is naive
        assert as_utc("joining") == "joining"
        assert as_utc(None) is None
