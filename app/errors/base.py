from collections.abc import Awaitable, Callable
from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from structlog.stdlib import BoundLogger

from app.configs.settings import DEFAULT_ERROR_MESSAGE
from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)

BASE_EXCEPTION = (
    OSError,
    PermissionError,
    RuntimeError,
    ConnectionError,
    TimeoutError,
)


class BaseAppError(Exception):
    """Base exception class for application errors."""

    def __init__(
        self,
        detail: str = DEFAULT_ERROR_MESSAGE,
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail


class InternalError(BaseAppError):
    """Raised for any failure that has no more specific mapping."""


def error_response(detail: str, status_code: int) -> ORJSONResponse:
    """Build the JSON error body shared by every failure path."""
    return ORJSONResponse(content={"error": detail}, status_code=status_code)


def create_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a standardized exception handler for the application.

    Args:
        logger: Logger instance to use for logging exceptions.

    Returns:
        A callable exception handler rendering ``{"error": detail}``.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        status_code = getattr(exc, "status_code", HTTP_500_INTERNAL_SERVER_ERROR)
        detail = getattr(exc, "detail", DEFAULT_ERROR_MESSAGE)

        log = logger.error if status_code >= HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
        log(
            "Request failed",
            detail=detail,
            status_code=status_code,
            ip=host(request),
            path=request.url.path,
        )

        return error_response(detail, status_code)

    return handler


async def internal_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Map any unexpected exception to a 500 without leaking its message."""
    logger.error(
        "Unhandled exception",
        ip=host(request),
        path=request.url.path,
        exc_info=exc,
    )
    error = InternalError()
    return error_response(error.detail, error.status_code)


async def http_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    """Render framework HTTP errors (unknown route, wrong method) in the same shape."""
    http_exc = cast(StarletteHTTPException, exc)
    response = error_response(str(http_exc.detail), http_exc.status_code)
    if http_exc.headers:
        response.headers.update(http_exc.headers)
    return response
