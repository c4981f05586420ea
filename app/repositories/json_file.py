"""
JSON file blog repository.

Stores every post in a single ``{"blogs": [...]}`` document on disk.
Suitable for development and single-process deployments: the lock below
serializes read-modify-write cycles within one process only.
"""

from asyncio import Lock
from datetime import datetime
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os
from orjson import OPT_INDENT_2, JSONDecodeError, dumps, loads

from app.errors.database import PersistenceError
from app.models.blog import BlogDB
from app.monitoring import get_logger
from app.repositories.base import apply_update, build_blog, ensure_valid_id
from app.schemas.blog import BlogCreate, BlogResponse, BlogUpdate

logger = get_logger(__name__)


def to_document(blog: BlogDB) -> dict[str, Any]:
    """Serialize a blog to its camelCase JSON document."""
    return BlogResponse.model_validate(blog).model_dump(mode="json", by_alias=True)


def from_document(document: dict[str, Any]) -> BlogDB:
    """Rebuild a blog from its JSON document."""
    return BlogDB(
        id=document["id"],
        heading=document["heading"],
        content=document["content"],
        excerpt=document.get("excerpt", ""),
        image_url=document.get("imageUrl", ""),
        image_public_id=document.get("imagePublicId", ""),
        created_at=datetime.fromisoformat(document["createdAt"]),
        updated_at=datetime.fromisoformat(document["updatedAt"]),
    )


class JsonFileBlogRepository:
    """Blog repository backed by a JSON file."""

    def __init__(self, data_file: Path | str) -> None:
        self.data_file = Path(data_file)
        self._lock = Lock()

    async def _read(self) -> list[BlogDB]:
        try:
            async with aiofiles.open(self.data_file, "rb") as f:
                raw = await f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.exception("Failed to read blog store", path=str(self.data_file))
            raise PersistenceError(detail="Failed to load blogs") from e

        try:
            store = loads(raw) if raw else {}
            return [from_document(doc) for doc in store.get("blogs", [])]
        except (JSONDecodeError, KeyError, TypeError, ValueError, AttributeError):
            logger.warning("Blog store is unreadable, treating it as empty", path=str(self.data_file))
            return []

    async def _write(self, blogs: list[BlogDB]) -> None:
        payload = dumps({"blogs": [to_document(blog) for blog in blogs]}, option=OPT_INDENT_2)
        tmp_file = self.data_file.with_name(f"{self.data_file.name}.tmp")

        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(tmp_file, "wb") as f:
                await f.write(payload)
            await aiofiles.os.replace(tmp_file, self.data_file)
        except OSError as e:
            logger.exception("Failed to write blog store", path=str(self.data_file))
            raise PersistenceError(detail="Failed to save blog") from e

    async def create(self, data: BlogCreate) -> BlogDB:
        blog = build_blog(data)
        async with self._lock:
            blogs = await self._read()
            blogs.append(blog)
            await self._write(blogs)
        return blog

    async def list_all(self) -> list[BlogDB]:
        async with self._lock:
            blogs = await self._read()
        # sorted() is stable, so equal timestamps keep file order
        return sorted(blogs, key=lambda blog: blog.created_at, reverse=True)

    async def get_by_id(self, blog_id: str) -> BlogDB | None:
        ensure_valid_id(blog_id)
        async with self._lock:
            blogs = await self._read()
        return next((blog for blog in blogs if blog.id == blog_id), None)

    async def delete_by_id(self, blog_id: str) -> BlogDB | None:
        ensure_valid_id(blog_id)
        async with self._lock:
            blogs = await self._read()
            for index, blog in enumerate(blogs):
                if blog.id == blog_id:
                    del blogs[index]
                    await self._write(blogs)
                    return blog
        return None

    async def update_by_id(self, blog_id: str, data: BlogUpdate) -> BlogDB | None:
        ensure_valid_id(blog_id)
        async with self._lock:
            blogs = await self._read()
            blog = next((blog for blog in blogs if blog.id == blog_id), None)
            if blog is None:
                return None
            apply_update(blog, data)
            await self._write(blogs)
        return blog
