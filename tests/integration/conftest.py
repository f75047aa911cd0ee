"""集成测试 fixtures - 每个测试一个临时 SQLite 数据库

每个测试在 tmp_path 下有自己的数据库文件。引擎使用 NullPool，
所以 aiosqlite 连接不会比打开它的事件循环活得更久
（TestClient 的每个请求都在自己的事件循环上运行）。
"""


import asyncio

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from src.infrastructure.database.base import get_session
from src.infrastructure.database.schema import ensure_schema
from src.interfaces.api.main import app


@pytest.fixture
def database_url(tmp_path) -> str:
    url = f"sqlite+aiosqlite:///{tmp_path / 'jml_test.db'}"

    async def create_tables() -> None:
        engine = create_async_engine(url, poolclass=NullPool)
        await ensure_schema(engine, force=True)
        await engine.dispose()

    asyncio.run(create_tables())
    return url


@pytest_asyncio.fixture
async def session(database_url):
    """临时数据库上的 AsyncSession（Repository 测试使用）"""
    engine = create_async_engine(database_url, poolclass=NullPool)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as db_session:
        yield db_session
    await engine.dispose()


@pytest.fixture
def client(database_url):
    """get_session 指向临时数据库的 TestClient"""
    engine = create_async_engine(database_url, poolclass=NullPool)
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    async def override_get_session():
        async with factory() as db_session:
            yield db_session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def department(client) -> dict:
    response = client.post("/api/departments", json={"name": "Engineering"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def employee(client, department) -> dict:
    response = client.post(
        "/api/employees",
        json={
            "firstName": "John",
            "lastName": "Doe",
            "email": "john.doe@company.com",
            "jobTitle": "Software Engineer",
            "departmentId": department["id"],
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def joiner_template(client) -> dict:
    response = client.post(
        "/api/templates",
        json={
            "name": "Standard New Hire Onboarding",
            "type": "joiner",
            "status": "active",
            "steps": [
                {"name": "HR Documentation", "stepOrder": 2, "assigneeRole": "hr_manager"},
                {"name": "IT Equipment Setup", "stepOrder": 1, "assigneeRole": "it_admin"},
            ],
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def workflow(client, joiner_template, employee) -> dict:
    response = client.post(
        "/api/workflows",
        json={
            "templateId": joiner_template["id"],
            "employeeId": employee["id"],
            "name": "Onboarding: John Doe",
            "type": "joiner",
            "initiatedBy": "hr-manager-1",
        },
    )
    assert response.status_code == 201
    return response.json()
