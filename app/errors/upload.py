"""
Upload-related error classes.

This module defines custom exceptions for image upload operations,
including file validation and media store errors.
"""

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from app.errors.base import BaseAppError, create_exception_handler
from app.monitoring import get_logger

logger = get_logger(__name__)


class UploadError(BaseAppError):
    """Raised when the media store rejects an upload or cannot be reached."""

    def __init__(
        self,
        detail: str = "Image upload failed",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail=detail, status_code=status_code)


class ImageTooLargeError(UploadError):
    """Exception raised when uploaded image exceeds size limit."""

    def __init__(
        self,
        max_size_mb: int = 5,
        actual_size_mb: float | None = None,
    ) -> None:
        super().__init__(
            detail=f"File size exceeds {max_size_mb}MB limit",
            status_code=HTTP_400_BAD_REQUEST,
        )
        self.max_size_mb = max_size_mb
        self.actual_size_mb = actual_size_mb


class UnsupportedImageTypeError(UploadError):
    """Exception raised when the uploaded file is not an image."""

    def __init__(self, content_type: str) -> None:
        super().__init__(
            detail="Only image files are allowed",
            status_code=HTTP_400_BAD_REQUEST,
        )
        self.content_type = content_type


# Create exception handler for upload errors
upload_exception_handler = create_exception_handler(logger)
