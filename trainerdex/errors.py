"""Typed failures raised by the query executor and their HTTP mapping."""

import asyncio
import functools
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Dict, Iterator

import asyncpg
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    CONSTRAINT_VIOLATION = "constraint_violation"
    INVALID_INPUT = "invalid_input"
    QUERY_FAILED = "query_failed"


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BACKEND_UNAVAILABLE: 503,
    ErrorKind.CONSTRAINT_VIOLATION: 409,
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.QUERY_FAILED: 500,
}


class StoreError(Exception):
    """A database operation failed.

    ``fallback`` holds the sentinel fields the failing route wants in its
    response body (for example ``{"data": []}``); it is filled in by
    :func:`failure_fallback`.
    """

    def __init__(self, kind: ErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind
        self.message = message or kind.value
        self.fallback: Dict[str, Any] = {}

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


def translate_error(exc: BaseException) -> StoreError:
    """Map a driver exception onto a StoreError kind."""
    if isinstance(exc, StoreError):
        return exc
    if isinstance(exc, asyncpg.IntegrityConstraintViolationError):
        kind = ErrorKind.CONSTRAINT_VIOLATION
    elif isinstance(exc, (asyncpg.exceptions.DataError, ValueError)):
        # argument encoding errors are raised client-side as ValueError
        kind = ErrorKind.INVALID_INPUT
    elif isinstance(exc, (
        asyncpg.PostgresConnectionError,
        asyncpg.CannotConnectNowError,
        asyncpg.TooManyConnectionsError,
        asyncpg.InterfaceError,
        OSError,
        asyncio.TimeoutError,
    )):
        kind = ErrorKind.BACKEND_UNAVAILABLE
    else:
        kind = ErrorKind.QUERY_FAILED
    return StoreError(kind, f"{type(exc).__name__}: {exc}")


@contextmanager
def failure_fallback(**fields: Any) -> Iterator[None]:
    """Attach sentinel response fields to any StoreError raised in the block."""
    try:
        yield
    except StoreError as e:
        e.fallback = fields
        raise


def on_failure(**fields: Any) -> Callable:
    """Declare the sentinel fields a route puts in every failure body.

    Applies to store errors raised by the route and to request validation
    errors raised before it runs.
    """

    def decorator(endpoint: Callable) -> Callable:
        @functools.wraps(endpoint)
        async def wrapper(*args, **kwargs):
            with failure_fallback(**fields):
                return await endpoint(*args, **kwargs)

        wrapper.failure_fields = fields
        return wrapper

    return decorator


def _failure_body(kind: ErrorKind, fields: Dict[str, Any]) -> Dict[str, Any]:
    return {"success": False, "error": kind.value, **fields}


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    if exc.kind is ErrorKind.NOT_FOUND:
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.error(f"{request.method} {request.url.path} failed [{exc.kind.value}]: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=_failure_body(exc.kind, exc.fallback))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path}: invalid request {exc.errors()}")
    fields = getattr(request.scope.get("endpoint"), "failure_fields", {})
    return JSONResponse(
        status_code=STATUS_BY_KIND[ErrorKind.INVALID_INPUT],
        content=_failure_body(ErrorKind.INVALID_INPUT, fields),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
