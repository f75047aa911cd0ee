"""FastAPI 应用入口"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.config import settings
from src.infrastructure.database.schema import ensure_schema
from src.interfaces.api.error_handlers import register_exception_handlers
from src.interfaces.api.routes import (
    audit_logs,
    departments,
    employees,
    notifications,
    reports,
    seed,
    tasks,
    templates,
    users,
    workflows,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def _get_display_host() -> str:
    """返回适合在链接中展示的主机地址"""
    if settings.host in {"0.0.0.0", "::"}:
        return "127.0.0.1"
    return settings.host


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    display_host = _get_display_host()
    logger.info("%s v%s 启动中 (env=%s)", settings.app_name, settings.app_version, settings.env)
    logger.info("API 文档: http://%s:%s/docs", display_host, settings.port)

    try:
        await ensure_schema()
    except SQLAlchemyError as exc:
        logger.warning("建表失败，请执行 Alembic 迁移: %s", exc)

    yield

    logger.info("%s 正在关闭", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Joiner / Mover / Leaver workflow automation for HR operations",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    return JSONResponse(
        content={
            "status": "healthy",
            "app_name": settings.app_name,
            "version": settings.app_version,
            "env": settings.env,
        }
    )


@app.get("/", tags=["Root"])
async def root() -> JSONResponse:
    display_host = _get_display_host()
    return JSONResponse(
        content={
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "docs": f"http://{display_host}:{settings.port}/docs",
        }
    )


app.include_router(users.router, prefix="/api", tags=["Users"])
app.include_router(departments.router, prefix="/api", tags=["Departments"])
app.include_router(employees.router, prefix="/api", tags=["Employees"])
app.include_router(templates.router, prefix="/api", tags=["Templates"])
app.include_router(workflows.router, prefix="/api", tags=["Workflows"])
app.include_router(workflows.steps_router, prefix="/api", tags=["Workflows"])
app.include_router(tasks.router, prefix="/api", tags=["Tasks"])
app.include_router(notifications.router, prefix="/api", tags=["Notifications"])
app.include_router(audit_logs.router, prefix="/api", tags=["Audit Logs"])
app.include_router(reports.router, prefix="/api", tags=["Reports"])
app.include_router(seed.router, prefix="/api", tags=["Seed"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.interfaces.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
