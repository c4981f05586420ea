from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.configs.settings import BLOG_NOT_FOUND_ERROR, INVALID_BLOG_ID_ERROR
from app.errors.base import BaseAppError, create_exception_handler
from app.monitoring import get_logger

logger = get_logger(__name__)


class DatabaseError(BaseAppError):
    """Base exception for repository errors."""

    def __init__(
        self,
        detail: str = "Database Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail, status_code)


class PersistenceError(DatabaseError):
    """Exception raised when the store is unreachable or rejects a write."""

    def __init__(
        self,
        detail: str = "Failed to save blog",
    ) -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class DatabaseConnectionError(PersistenceError):
    """Exception raised when database connection fails."""

    def __init__(
        self,
        detail: str = "Failed to connect to the database",
    ) -> None:
        super().__init__(detail)


class NotFoundError(DatabaseError):
    """Exception raised when no blog matches the requested id."""

    def __init__(
        self,
        detail: str = BLOG_NOT_FOUND_ERROR,
    ) -> None:
        super().__init__(detail, HTTP_404_NOT_FOUND)


class InvalidIdError(DatabaseError):
    """Exception raised when an id is not well-formed for the backend."""

    def __init__(
        self,
        detail: str = INVALID_BLOG_ID_ERROR,
    ) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


database_exception_handler = create_exception_handler(logger)
