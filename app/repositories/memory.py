"""In-memory blog repository."""

from asyncio import Lock

from app.models.blog import BlogDB
from app.repositories.base import apply_update, build_blog, copy_blog, ensure_valid_id
from app.schemas.blog import BlogCreate, BlogUpdate


class InMemoryBlogRepository:
    """
    Blog repository keeping posts in a process-local list.

    Nothing survives a restart. Used by tests and for quick local runs.
    Callers always receive copies, never the stored records.
    """

    def __init__(self) -> None:
        self._blogs: list[BlogDB] = []
        self._lock = Lock()

    async def create(self, data: BlogCreate) -> BlogDB:
        blog = build_blog(data)
        async with self._lock:
            self._blogs.append(blog)
        return copy_blog(blog)

    async def list_all(self) -> list[BlogDB]:
        async with self._lock:
            ordered = sorted(self._blogs, key=lambda blog: blog.created_at, reverse=True)
            return [copy_blog(blog) for blog in ordered]

    async def get_by_id(self, blog_id: str) -> BlogDB | None:
        ensure_valid_id(blog_id)
        async with self._lock:
            blog = next((blog for blog in self._blogs if blog.id == blog_id), None)
            return copy_blog(blog) if blog else None

    async def delete_by_id(self, blog_id: str) -> BlogDB | None:
        ensure_valid_id(blog_id)
        async with self._lock:
            for index, blog in enumerate(self._blogs):
                if blog.id == blog_id:
                    return self._blogs.pop(index)
        return None

    async def update_by_id(self, blog_id: str, data: BlogUpdate) -> BlogDB | None:
        ensure_valid_id(blog_id)
        async with self._lock:
            blog = next((blog for blog in self._blogs if blog.id == blog_id), None)
            if blog is None:
                return None
            return copy_blog(apply_update(blog, data))
