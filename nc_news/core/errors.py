from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger("nc_news.errors")

BAD_REQUEST = "Bad Request"
NOT_FOUND = "Not Found"
INTERNAL_ERROR = "Internal Server Error"


class ApiError(Exception):
    """Error carrying the HTTP status and the plain-text message shown to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, msg: str, status_code: int | None = None) -> None:
        super().__init__(msg)
        self.msg = msg
        if status_code is not None:
            self.status_code = status_code


class InvalidParameter(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, param: str | None = None) -> None:
        super().__init__(BAD_REQUEST)
        self.param = param


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


def classify_store_error(exc: asyncpg.PostgresError) -> tuple[int, str]:
    # Constraint failures come from the store; map them to what the caller did wrong
    if isinstance(exc, asyncpg.ForeignKeyViolationError):
        return status.HTTP_404_NOT_FOUND, NOT_FOUND
    if isinstance(exc, (
        asyncpg.InvalidTextRepresentationError,
        asyncpg.NotNullViolationError,
        asyncpg.UniqueViolationError,
        asyncpg.DataError,
    )):
        return status.HTTP_400_BAD_REQUEST, BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR


async def api_error_handler(request: Request, exc: ApiError) -> PlainTextResponse:
    logger.info(
        "Request rejected",
        extra={"event": "api_error", "path": request.url.path, "status": exc.status_code},
    )
    return PlainTextResponse(exc.msg, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.info(
        "Request validation failed",
        extra={"event": "request_invalid", "path": request.url.path, "errors": exc.errors()},
    )
    return PlainTextResponse(BAD_REQUEST, status_code=status.HTTP_400_BAD_REQUEST)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    # Unknown routes and unsupported methods from the router itself
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def store_error_handler(request: Request, exc: asyncpg.PostgresError) -> PlainTextResponse:
    status_code, msg = classify_store_error(exc)
    if status_code >= 500:
        logger.exception(
            "Store failure",
            exc_info=exc,
            extra={"event": "store_failure", "path": request.url.path, "sqlstate": getattr(exc, "sqlstate", None)},
        )
    else:
        logger.info(
            "Store rejected request",
            extra={"event": "store_rejected", "path": request.url.path, "sqlstate": getattr(exc, "sqlstate", None)},
        )
    return PlainTextResponse(msg, status_code=status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(asyncpg.PostgresError, store_error_handler)
