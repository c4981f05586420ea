# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read once at import time, so this must happen before the
# app is imported anywhere
os.environ["REPOSITORY_BACKEND"] = "memory"
os.environ["STORAGE_PROVIDER"] = "cloudinary"
os.environ["CLOUDINARY_CLOUD_NAME"] = "demo"
os.environ["CLOUDINARY_API_KEY"] = "test-key"
os.environ["CLOUDINARY_API_SECRET"] = "test-secret"
os.environ["LOG_TO_FILE"] = "false"
os.environ["REQUIRE_IMAGE"] = "false"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.errors.upload import UploadError  # noqa: E402
from app.main import app  # noqa: E402
from app.repositories.memory import InMemoryBlogRepository  # noqa: E402
from app.services.storage.base import MediaRef, generate_public_id  # noqa: E402

FAKE_MEDIA_HOST = "https://media.test"


class FakeMediaStore:
    """
    Media store double recording every call.

    ``fail_upload`` makes uploads raise, ``fail_delete`` makes deletes
    report failure the way real stores do (returning False, never raising).
    """

    def __init__(self) -> None:
        self.uploads: list[tuple[bytes, str, str]] = []
        self.deleted: list[str] = []
        self.stored: set[str] = set()
        self.fail_upload = False
        self.fail_delete = False

    async def upload(self, file_data: bytes, original_name: str, content_type: str) -> MediaRef:
        if self.fail_upload:
            raise UploadError(detail="Image upload failed")
        self.uploads.append((file_data, original_name, content_type))
        public_id = f"blogs/{generate_public_id()}"
        self.stored.add(public_id)
        return MediaRef(url=f"{FAKE_MEDIA_HOST}/{public_id}.jpg", public_id=public_id)

    async def delete(self, public_id: str) -> bool:
        self.deleted.append(public_id)
        if self.fail_delete:
            return False
        if public_id in self.stored:
            self.stored.remove(public_id)
            return True
        return False

    def extract_public_id(self, url: str | None) -> str | None:
        prefix = f"{FAKE_MEDIA_HOST}/"
        if not url or not url.startswith(prefix):
            return None
        return url.removeprefix(prefix).rsplit(".", 1)[0]


@pytest.fixture
def media_store() -> FakeMediaStore:
    """Create a fresh fake media store."""
    return FakeMediaStore()


@pytest.fixture
def blog_repository() -> InMemoryBlogRepository:
    """Create an empty in-memory blog repository."""
    return InMemoryBlogRepository()


@pytest.fixture
async def client(
    blog_repository: InMemoryBlogRepository,
    media_store: FakeMediaStore,
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client with the test repository and media store on app.state."""
    app.state.blog_repository = blog_repository
    app.state.media_store = media_store
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac


@pytest.fixture
async def unsafe_client(
    blog_repository: InMemoryBlogRepository,
    media_store: FakeMediaStore,
) -> AsyncGenerator[AsyncClient]:
    """Client that returns 500 responses instead of re-raising server errors."""
    app.state.blog_repository = blog_repository
    app.state.media_store = media_store
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app, raise_app_exceptions=False),
    ) as ac:
        yield ac
