"""
Blog repository contract.

Every storage backend (SQL database, JSON file, in-memory map) implements
:class:`BlogRepository`. The helpers below hold the rules shared by all of
them so each backend only deals with storing and finding records.
"""

from abc import abstractmethod
from typing import Protocol

from app.errors.database import InvalidIdError
from app.errors.validation import ValidationError
from app.models.blog import BlogDB
from app.schemas.blog import BlogCreate, BlogUpdate
from app.utils.helpers import generate_excerpt, is_valid_blog_id, new_blog_id, utc_now


class BlogRepository(Protocol):
    """Protocol defining the operations every blog store provides."""

    @abstractmethod
    async def create(self, data: BlogCreate) -> BlogDB:
        """
        Persist a new blog post.

        Args:
            data: Heading, content and optional image reference

        Returns:
            BlogDB: The stored record with id, excerpt and timestamps set

        Raises:
            ValidationError: If heading or content is empty after trimming
            PersistenceError: If the store rejects the write
        """
        ...

    @abstractmethod
    async def list_all(self) -> list[BlogDB]:
        """Return every post, newest first; ties keep insertion order."""
        ...

    @abstractmethod
    async def get_by_id(self, blog_id: str) -> BlogDB | None:
        """
        Get a post by id.

        Raises:
            InvalidIdError: If ``blog_id`` is not a well-formed identifier
        """
        ...

    @abstractmethod
    async def delete_by_id(self, blog_id: str) -> BlogDB | None:
        """
        Remove a post and return it in one step.

        Returns:
            BlogDB | None: The removed record, or None if no record matched
        """
        ...

    @abstractmethod
    async def update_by_id(self, blog_id: str, data: BlogUpdate) -> BlogDB | None:
        """Apply non-empty fields of ``data``; None if no record matched."""
        ...


def ensure_valid_id(blog_id: str) -> None:
    """Raise InvalidIdError unless ``blog_id`` is well-formed."""
    if not is_valid_blog_id(blog_id):
        raise InvalidIdError


def build_blog(data: BlogCreate) -> BlogDB:
    """
    Validate creation data and build an unsaved record.

    Heading and content are trimmed, the excerpt is derived from the
    content, and both timestamps share a single ``now``.
    """
    heading = data.heading.strip()
    content = data.content.strip()
    if not heading or not content:
        raise ValidationError

    now = utc_now()
    return BlogDB(
        id=new_blog_id(),
        heading=heading,
        content=content,
        excerpt=generate_excerpt(content),
        image_url=data.image_url.strip(),
        image_public_id=data.image_public_id.strip(),
        created_at=now,
        updated_at=now,
    )


def copy_blog(blog: BlogDB) -> BlogDB:
    """Detached copy of a record."""
    return BlogDB(**blog.model_dump())


def apply_update(blog: BlogDB, data: BlogUpdate) -> BlogDB:
    """
    Apply an update in place.

    Empty or missing heading/content keep their stored value. Image fields
    are replaced whenever they are provided, even with an empty string.
    """
    if data.heading and data.heading.strip():
        blog.heading = data.heading.strip()
    if data.content and data.content.strip():
        blog.content = data.content.strip()
        blog.excerpt = generate_excerpt(blog.content)
    if data.image_url is not None:
        blog.image_url = data.image_url.strip()
    if data.image_public_id is not None:
        blog.image_public_id = data.image_public_id.strip()
    blog.updated_at = utc_now()
    return blog
