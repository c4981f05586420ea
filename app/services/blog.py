"""
Blog service.

This module composes the blog repository and the media store into the
create, update and delete lifecycles. An image uploaded for a write that
then fails to persist is deleted again, so a failed request never leaves
an orphaned object behind.
"""

from starlette.datastructures import UploadFile

from app.configs.settings import IMAGE_REQUIRED_ERROR, settings
from app.errors.database import NotFoundError
from app.errors.upload import ImageTooLargeError, UnsupportedImageTypeError
from app.errors.validation import ValidationError
from app.models.blog import BlogDB
from app.monitoring import get_logger
from app.repositories.base import BlogRepository
from app.schemas.blog import BlogCreate, BlogUpdate
from app.services.storage.base import MediaRef, MediaStore

logger = get_logger(__name__)


class BlogService:
    """
    Service for blog post lifecycles.

    Handles image validation and upload, persistence through the
    repository, and best-effort media cleanup.
    """

    def __init__(self, repository: BlogRepository, media_store: MediaStore) -> None:
        """
        Initialize the blog service.

        Args:
            repository: Blog store the service persists to
            media_store: Media store used for uploaded images
        """
        self.repository = repository
        self.media_store = media_store
        self.max_upload_size_bytes = settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    def _validate_image_type(self, content_type: str | None) -> None:
        """Validate image content type."""
        if not content_type or not content_type.startswith("image/"):
            raise UnsupportedImageTypeError(content_type=content_type or "unknown")

    def _validate_image_size(self, file_data: bytes) -> None:
        """Validate image file size."""
        actual_size = len(file_data)
        if actual_size > self.max_upload_size_bytes:
            raise ImageTooLargeError(
                max_size_mb=settings.MAX_UPLOAD_SIZE_MB,
                actual_size_mb=actual_size / (1024 * 1024),
            )

    async def _upload_image(self, image: UploadFile) -> MediaRef:
        """Validate an uploaded file and push it to the media store."""
        self._validate_image_type(image.content_type)
        file_data = await image.read()
        self._validate_image_size(file_data)
        return await self.media_store.upload(
            file_data,
            image.filename or "",
            image.content_type or "",
        )

    async def _discard_image(self, public_id: str, reason: str) -> None:
        """Delete a media object; the outcome is logged and otherwise ignored."""
        deleted = await self.media_store.delete(public_id)
        logger.info("Media cleanup", public_id=public_id, reason=reason, deleted=deleted)

    def _owned_public_id(self, blog: BlogDB) -> str | None:
        """Handle of the media object a record owns, if any."""
        return blog.image_public_id or self.media_store.extract_public_id(blog.image_url)

    async def list_blogs(self) -> list[BlogDB]:
        return await self.repository.list_all()

    async def get_blog(self, blog_id: str) -> BlogDB:
        """
        Get a blog post by id.

        Raises:
            InvalidIdError: If the id is malformed
            NotFoundError: If no post has this id
        """
        blog = await self.repository.get_by_id(blog_id)
        if blog is None:
            raise NotFoundError
        return blog

    async def create_blog(
        self,
        heading: str,
        content: str,
        image_url: str = "",
        image: UploadFile | None = None,
    ) -> BlogDB:
        """
        Create a blog post, uploading its image first when one is attached.

        An uploaded file overrides ``image_url``. If persisting fails after
        the upload, the uploaded object is deleted exactly once and the
        original error propagates.

        Args:
            heading: Post heading
            content: Post body
            image_url: External image URL
            image: Uploaded image file

        Returns:
            BlogDB: The stored post
        """
        if not heading.strip() or not content.strip():
            raise ValidationError
        if settings.REQUIRE_IMAGE and image is None and not image_url.strip():
            raise ValidationError(detail=IMAGE_REQUIRED_ERROR)

        uploaded = await self._upload_image(image) if image is not None else None
        data = BlogCreate(
            heading=heading,
            content=content,
            image_url=uploaded.url if uploaded else image_url,
            image_public_id=uploaded.public_id if uploaded else "",
        )

        try:
            blog = await self.repository.create(data)
        except Exception:
            if uploaded:
                await self._discard_image(uploaded.public_id, reason="create failed")
            raise

        logger.info("Blog created", blog_id=blog.id, has_image=bool(blog.image_url))
        return blog

    async def update_blog(
        self,
        blog_id: str,
        heading: str = "",
        content: str = "",
        image_url: str = "",
        image: UploadFile | None = None,
    ) -> BlogDB:
        """
        Update a blog post.

        Empty fields keep their stored value. A new image (uploaded file or
        different URL) replaces the old one, and the old uploaded object is
        deleted once the update is stored. If the update fails after an
        upload, the new object is deleted instead.

        Raises:
            InvalidIdError: If the id is malformed
            NotFoundError: If no post has this id
        """
        existing = await self.get_blog(blog_id)
        old_public_id = self._owned_public_id(existing)

        uploaded = await self._upload_image(image) if image is not None else None
        data = BlogUpdate(heading=heading or None, content=content or None)
        if uploaded:
            data.image_url = uploaded.url
            data.image_public_id = uploaded.public_id
        elif image_url.strip() and image_url.strip() != existing.image_url:
            data.image_url = image_url
            data.image_public_id = ""

        try:
            blog = await self.repository.update_by_id(blog_id, data)
            if blog is None:
                raise NotFoundError
        except Exception:
            if uploaded:
                await self._discard_image(uploaded.public_id, reason="update failed")
            raise

        if data.image_url is not None and old_public_id:
            await self._discard_image(old_public_id, reason="image replaced")

        logger.info("Blog updated", blog_id=blog.id)
        return blog

    async def delete_blog(self, blog_id: str) -> BlogDB:
        """
        Delete a blog post and its media object.

        The media delete is best-effort: its outcome never changes the
        result of the request.

        Returns:
            BlogDB: The removed post

        Raises:
            InvalidIdError: If the id is malformed
            NotFoundError: If no post has this id
        """
        blog = await self.repository.delete_by_id(blog_id)
        if blog is None:
            raise NotFoundError

        public_id = self._owned_public_id(blog)
        if public_id:
            await self._discard_image(public_id, reason="blog deleted")

        logger.info("Blog deleted", blog_id=blog_id)
        return blog
