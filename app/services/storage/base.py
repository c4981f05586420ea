"""
Base storage protocol for media store operations.

This module defines the abstract interface for media backends,
allowing for different implementations (cloudinary, local, etc.).
"""

from abc import abstractmethod
from dataclasses import dataclass
from secrets import choice
from string import ascii_lowercase, digits
from time import time
from typing import Protocol

PUBLIC_ID_PREFIX = "blog"


@dataclass(frozen=True)
class MediaRef:
    """Stable reference to a stored media object."""

    url: str
    public_id: str


def generate_public_id(prefix: str = PUBLIC_ID_PREFIX) -> str:
    """
    Generate a unique media key.

    Returns:
        str: Key shaped ``<prefix>-<epoch-ms>-<9 random base36 chars>``
    """
    suffix = "".join(choice(ascii_lowercase + digits) for _ in range(9))
    return f"{prefix}-{int(time() * 1000)}-{suffix}"


class MediaStore(Protocol):
    """
    Protocol defining the interface for media stores.

    All storage implementations must implement these methods
    to ensure consistent behavior across different backends.
    """

    @abstractmethod
    async def upload(
        self,
        file_data: bytes,
        original_name: str,
        content_type: str,
    ) -> MediaRef:
        """
        Upload a blob under a freshly generated key.

        Args:
            file_data: Raw file bytes
            original_name: Filename supplied by the client
            content_type: MIME type of the file

        Returns:
            MediaRef: URL and opaque handle of the stored object

        Raises:
            UploadError: If the store rejects the upload or is unreachable
        """
        ...

    @abstractmethod
    async def delete(self, public_id: str) -> bool:
        """
        Delete a stored object. Never raises.

        Args:
            public_id: Handle returned by :meth:`upload`

        Returns:
            bool: True if deletion was successful, False otherwise
        """
        ...

    @abstractmethod
    def extract_public_id(self, url: str | None) -> str | None:
        """
        Derive the handle from a URL previously returned by this store.

        Returns:
            str | None: The handle, or None if the URL has another shape
        """
        ...
