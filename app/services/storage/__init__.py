"""
Storage services package.

This package provides media stores for blog images,
with support for local filesystem and Cloudinary.
"""

from app.configs.settings import settings
from app.services.storage.base import MediaRef, MediaStore, generate_public_id
from app.services.storage.cloudinary_storage import CloudinaryStorage
from app.services.storage.local import LocalStorage


def get_storage_service() -> MediaStore:
    """
    Get the configured media store.

    Returns the appropriate storage implementation based on
    the STORAGE_PROVIDER setting.

    Returns:
        MediaStore: Configured media store instance
    """
    if settings.STORAGE_PROVIDER == "cloudinary":
        return CloudinaryStorage()
    return LocalStorage()


__all__ = [
    "CloudinaryStorage",
    "LocalStorage",
    "MediaRef",
    "MediaStore",
    "generate_public_id",
    "get_storage_service",
]
