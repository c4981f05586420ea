# tests/repositories/conftest.py
"""Pytest fixtures for repository tests."""

import tempfile
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest

from app.db.database import Database
from app.repositories import (
    BlogRepository,
    InMemoryBlogRepository,
    JsonFileBlogRepository,
    SQLBlogRepository,
)


@pytest.fixture
def tmp_dir() -> Generator[Path]:
    """Create a temporary directory for file-backed stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
async def database(tmp_dir: Path) -> AsyncGenerator[Database]:
    """Create a SQLite database with the blog table in a temp directory."""
    db = Database(f"sqlite+aiosqlite:///{tmp_dir / 'blogs.db'}")
    await db.init_db()
    yield db
    await db.close()


@pytest.fixture(params=["memory", "json", "sql"])
async def repository(
    request: pytest.FixtureRequest,
    tmp_dir: Path,
) -> AsyncGenerator[BlogRepository]:
    """Yield each repository backend in turn."""
    if request.param == "memory":
        yield InMemoryBlogRepository()
    elif request.param == "json":
        yield JsonFileBlogRepository(tmp_dir / "data" / "store.json")
    else:
        db = Database(f"sqlite+aiosqlite:///{tmp_dir / 'contract.db'}")
        await db.init_db()
        yield SQLBlogRepository(db)
        await db.close()
