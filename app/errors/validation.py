"""Validation errors and their JSON rendering."""

from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from app.configs.settings import REQUIRED_FIELDS_ERROR
from app.errors.base import BaseAppError, create_exception_handler, error_response
from app.monitoring import get_logger
from app.utils.helpers import host

logger = get_logger(__name__)


class ValidationError(BaseAppError):
    """Raised when a required field is missing or empty."""

    def __init__(self, detail: str = REQUIRED_FIELDS_ERROR) -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Render FastAPI request validation errors as a single ``error`` string.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.
    """
    exec_error = cast(RequestValidationError, exc)

    messages = []
    for error in exec_error.errors():
        field = ".".join(str(loc) for loc in error.get("loc", [])[1:])
        message = error.get("msg", "Invalid value")
        messages.append(f"{field}: {message}" if field else message)

    logger.warning(
        "Request validation failed",
        ip=host(request),
        path=request.url.path,
        errors=messages,
    )

    return error_response("; ".join(messages) or "Invalid request", HTTP_400_BAD_REQUEST)


app_validation_exception_handler = create_exception_handler(logger)
