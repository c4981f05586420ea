from app.configs.settings import (
    BLOG_NOT_FOUND_ERROR,
    EXCERPT_LIMIT,
    INVALID_BLOG_ID_ERROR,
    REQUIRED_FIELDS_ERROR,
    Settings,
    settings,
)

__all__ = [
    "BLOG_NOT_FOUND_ERROR",
    "EXCERPT_LIMIT",
    "INVALID_BLOG_ID_ERROR",
    "REQUIRED_FIELDS_ERROR",
    "Settings",
    "settings",
]
