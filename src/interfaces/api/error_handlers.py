"""异常处理器 - 整个 API 统一的错误响应格式

所有错误的格式：

    {"message": "Human readable message"}

校验失败时附带出错的字段：

    {"message": "Invalid request data",
     "errors": [{"field": "password", "message": "Field required", "type": "missing"}]}

映射关系：
- RequestValidationError (pydantic)  -> 400
- ValidationError (领域)             -> 400
- NotFoundError (领域)               -> 404
- DomainError                        -> 400
- HTTPException                      -> 保持原状态码
- 其他异常                           -> 500，记录完整堆栈

为什么校验错误是 400 而不是 FastAPI 默认的 422？
- 客户端只区分 400 / 404 / 500 三类错误
"""


import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain.exceptions import DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _field_name(loc: tuple[Any, ...]) -> str:
    # ("body", "steps", 0, "name") -> "steps.0.name"; ("body",) -> "body"
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def _error_response(
    status_code: int, message: str, errors: list[dict[str, str]] | None = None
) -> JSONResponse:
    content: dict[str, Any] = {"message": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": _field_name(tuple(error.get("loc", ()))),
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "value_error"),
        }
        for error in exc.errors()
    ]
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request data", errors)


async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST, exc.message, [error.to_dict() for error in exc.errors]
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("未处理的异常 %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
