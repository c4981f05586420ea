from app.errors.base import (
    BASE_EXCEPTION,
    BaseAppError,
    InternalError,
    create_exception_handler,
    error_response,
    http_exception_handler,
    internal_exception_handler,
)
from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    InvalidIdError,
    NotFoundError,
    PersistenceError,
    database_exception_handler,
)
from app.errors.upload import (
    ImageTooLargeError,
    UnsupportedImageTypeError,
    UploadError,
    upload_exception_handler,
)
from app.errors.validation import (
    ValidationError,
    app_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "BASE_EXCEPTION",
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "ImageTooLargeError",
    "InternalError",
    "InvalidIdError",
    "NotFoundError",
    "PersistenceError",
    "UnsupportedImageTypeError",
    "UploadError",
    "ValidationError",
    "app_validation_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "error_response",
    "http_exception_handler",
    "internal_exception_handler",
    "upload_exception_handler",
    "validation_exception_handler",
]
