"""Utility helper functions."""

from app.utils.helpers import (
    as_utc,
    generate_excerpt,
    get_summary,
    host,
    is_valid_blog_id,
    new_blog_id,
    today_str,
    utc_now,
)

__all__ = [
    "as_utc",
    "generate_excerpt",
    "get_summary",
    "host",
    "is_valid_blog_id",
    "new_blog_id",
    "today_str",
    "utc_now",
]
