"""Repository layer for blog storage backends."""

from app.configs.settings import settings
from app.db.database import Database
from app.repositories.base import BlogRepository
from app.repositories.blog import SQLBlogRepository
from app.repositories.json_file import JsonFileBlogRepository
from app.repositories.memory import InMemoryBlogRepository


def build_blog_repository(database: Database | None = None) -> BlogRepository:
    """
    Build the configured blog repository.

    Returns the implementation selected by the REPOSITORY_BACKEND setting.
    The SQL backend needs the process-wide database handle.
    """
    if settings.REPOSITORY_BACKEND == "json":
        return JsonFileBlogRepository(settings.DATA_FILE)
    if settings.REPOSITORY_BACKEND == "memory":
        return InMemoryBlogRepository()
    return SQLBlogRepository(database or Database(settings.DATABASE_URL))


__all__ = [
    "BlogRepository",
    "InMemoryBlogRepository",
    "JsonFileBlogRepository",
    "SQLBlogRepository",
    "build_blog_repository",
]
