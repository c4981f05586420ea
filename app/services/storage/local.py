"""
Local filesystem storage implementation.

This module provides a local storage backend for development
and testing purposes. Files are stored in the local filesystem
and served by the application under ``/uploads``.
"""

from pathlib import Path
from re import compile as re_compile

import aiofiles
import aiofiles.os

from app.configs.settings import settings
from app.errors.upload import UploadError
from app.monitoring import get_logger
from app.services.storage.base import MediaRef, generate_public_id

logger = get_logger(__name__)

URL_PREFIX = "/uploads"
SAFE_PUBLIC_ID = re_compile(r"^[A-Za-z0-9_-]+$")
SAFE_EXTENSION = re_compile(r"^\.[A-Za-z0-9]{1,10}$")
LOCAL_URL_PATTERN = re_compile(rf"^{URL_PREFIX}/(?P<public_id>[A-Za-z0-9_-]+)(?:\.[A-Za-z0-9]+)?$")


class LocalStorage:
    """
    Local filesystem storage implementation.

    Stores files flat under the configured uploads directory.
    Suitable for development and testing.
    """

    def __init__(self, uploads_dir: Path | None = None) -> None:
        """Initialize local storage with configured paths."""
        self.uploads_dir = Path(uploads_dir or settings.UPLOADS_DIR)
        self._ensure_directory()

    def _ensure_directory(self) -> None:
        """Ensure the upload directory exists."""
        self.uploads_dir.mkdir(parents=True, exist_ok=True)

    def _get_extension(self, original_name: str, content_type: str) -> str:
        """
        Pick a file extension from the original name or the content type.

        Args:
            original_name: Filename supplied by the client
            content_type: MIME type of the file

        Returns:
            str: Extension including the leading dot, or an empty string
        """
        suffix = Path(original_name or "").suffix.lower()
        if SAFE_EXTENSION.fullmatch(suffix):
            return suffix

        extensions = {
            "image/jpeg": ".jpg",
            "image/png": ".png",
            "image/webp": ".webp",
            "image/gif": ".gif",
            "image/svg+xml": ".svg",
        }
        return extensions.get(content_type, "")

    async def upload(
        self,
        file_data: bytes,
        original_name: str,
        content_type: str,
    ) -> MediaRef:
        """
        Write a file to the uploads directory.

        Args:
            file_data: Raw file bytes
            original_name: Filename supplied by the client
            content_type: MIME type of the file

        Returns:
            MediaRef: URL path for serving via static files and the key
        """
        public_id = generate_public_id()
        filename = f"{public_id}{self._get_extension(original_name, content_type)}"

        try:
            async with aiofiles.open(self.uploads_dir / filename, "wb") as f:
                await f.write(file_data)
        except OSError as e:
            logger.exception("Local upload failed", filename=filename)
            raise UploadError(detail="Failed to store image") from e

        logger.info("Image stored locally", public_id=public_id, original_name=original_name)
        return MediaRef(url=f"{URL_PREFIX}/{filename}", public_id=public_id)

    async def delete(self, public_id: str) -> bool:
        """
        Delete a file from the uploads directory.

        Args:
            public_id: Key returned by :meth:`upload`

        Returns:
            bool: True if deletion was successful, False otherwise
        """
        if not SAFE_PUBLIC_ID.fullmatch(public_id or ""):
            logger.warning("Refusing to delete unsafe key", public_id=public_id)
            return False

        for file_path in self.uploads_dir.glob(f"{public_id}*"):
            if file_path.stem != public_id:
                continue
            try:
                await aiofiles.os.remove(file_path)
            except OSError:
                logger.exception("Local delete failed", path=str(file_path))
                return False
            return True
        return False

    def extract_public_id(self, url: str | None) -> str | None:
        """
        Extract the key from a ``/uploads/<key>[.ext]`` URL.

        Args:
            url: URL returned by :meth:`upload`

        Returns:
            str | None: Key, or None for URLs of another shape
        """
        match = LOCAL_URL_PATTERN.fullmatch(url or "")
        return match["public_id"] if match else None
