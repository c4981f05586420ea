"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the blog backend application.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings.main import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
EXCERPT_LIMIT = 160
BLOG_ID_LENGTH = 12
MAX_BLOG_ID_LENGTH = 64

# Response constants
DEFAULT_ERROR_MESSAGE = "Internal server error"
REQUIRED_FIELDS_ERROR = "heading and content are required"
BLOG_NOT_FOUND_ERROR = "Blog not found"
INVALID_BLOG_ID_ERROR = "Invalid blog ID"
IMAGE_REQUIRED_ERROR = "Provide imageUrl or upload imageFile"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog CRUD API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/app.log"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 4000
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./blogs.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # Repository backend
    REPOSITORY_BACKEND: Literal["sql", "json", "memory"] = "sql"
    DATA_FILE: Path = Path("data") / "store.json"

    # Media storage
    STORAGE_PROVIDER: Literal["cloudinary", "local"] = "cloudinary"
    CLOUDINARY_URL: str | None = None
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: str = ""
    CLOUDINARY_FOLDER: str = "blogs"
    UPLOADS_DIR: Path = Path("uploads")

    # Upload policy
    MAX_UPLOAD_SIZE_MB: int = 5
    REQUIRE_IMAGE: bool = False


settings = Settings()
