"""
Cloudinary storage implementation.

This module provides a Cloudinary-based media backend for production
use. The SDK is blocking, so every call runs in the default executor.
"""

from asyncio import get_running_loop
from functools import partial
from os import environ
from re import compile as re_compile
from urllib.parse import urlsplit

from cloudinary import config, reset_config
from cloudinary.uploader import destroy, upload

from app.configs.settings import settings
from app.errors.upload import UploadError
from app.monitoring import get_logger
from app.services.storage.base import MediaRef, generate_public_id

logger = get_logger(__name__)

# https://res.cloudinary.com/<cloud>/<resource_type>/upload/[v<version>/]<public_id>[.<ext>]
CLOUDINARY_URL_PATTERN = re_compile(
    r"^/(?P<cloud>[^/]+)/(?P<resource_type>[^/]+)/upload/(?:v\d+/)?(?P<public_id>.+?)(?:\.\w+)?$",
)


class CloudinaryStorage:
    """
    Cloudinary storage implementation.

    Stores blog images in a single Cloudinary folder and deletes them
    by public id.
    """

    def __init__(self) -> None:
        """
        Initialize Cloudinary with configured credentials.

        ``CLOUDINARY_URL`` wins over the separate credentials. The SDK
        loads it from the environment, query options included.
        """
        if settings.CLOUDINARY_URL:
            environ["CLOUDINARY_URL"] = settings.CLOUDINARY_URL
            reset_config()
            self.cloud_name = config(secure=True).cloud_name or ""
        else:
            config(
                cloud_name=settings.CLOUDINARY_CLOUD_NAME,
                api_key=settings.CLOUDINARY_API_KEY,
                api_secret=settings.CLOUDINARY_API_SECRET,
                secure=True,
            )
            self.cloud_name = settings.CLOUDINARY_CLOUD_NAME
        self.folder = settings.CLOUDINARY_FOLDER

    async def upload(
        self,
        file_data: bytes,
        original_name: str,
        content_type: str,
    ) -> MediaRef:
        """
        Upload an image to Cloudinary.

        Args:
            file_data: Raw image bytes
            original_name: Filename supplied by the client
            content_type: MIME type of the image

        Returns:
            MediaRef: Secure URL and public id of the uploaded image
        """
        key = generate_public_id()

        loop = get_running_loop()
        try:
            result = await loop.run_in_executor(
                None,
                partial(
                    upload,
                    file_data,
                    public_id=key,
                    folder=self.folder,
                    resource_type="auto",
                ),
            )
        except Exception as e:
            logger.exception("Cloudinary upload failed", original_name=original_name)
            mssg = f"Cloudinary upload failed: {e}"
            raise UploadError(detail=mssg) from e

        logger.info(
            "Image uploaded",
            public_id=result["public_id"],
            original_name=original_name,
            content_type=content_type,
        )
        return MediaRef(url=result["secure_url"], public_id=result["public_id"])

    async def delete(self, public_id: str) -> bool:
        """
        Delete an image from Cloudinary.

        Args:
            public_id: Cloudinary public ID

        Returns:
            bool: True if deletion was successful, False otherwise
        """
        loop = get_running_loop()
        try:
            result = await loop.run_in_executor(
                None,
                partial(destroy, public_id, resource_type="image", invalidate=True),
            )
        except Exception:
            logger.exception("Cloudinary delete failed", public_id=public_id)
            return False

        deleted = result.get("result") == "ok"
        if not deleted:
            logger.warning("Cloudinary delete not confirmed", public_id=public_id, result=result)
        return deleted

    def extract_public_id(self, url: str | None) -> str | None:
        """
        Extract the public ID from a Cloudinary delivery URL.

        Args:
            url: Cloudinary URL

        Returns:
            str | None: Public ID, or None for URLs of another cloud or shape
        """
        if not url:
            return None

        parts = urlsplit(url)
        if not parts.netloc.endswith("cloudinary.com"):
            return None

        match = CLOUDINARY_URL_PATTERN.match(parts.path)
        if not match:
            return None
        if self.cloud_name and match["cloud"] != self.cloud_name:
            return None
        return match["public_id"]
