from datetime import UTC, datetime
from re import compile as re_compile
from secrets import choice
from string import ascii_letters, digits

from fastapi import Request
from fastapi.routing import APIRoute
from starlette.routing import Match

from app.configs.settings import BLOG_ID_LENGTH, EXCERPT_LIMIT, MAX_BLOG_ID_LENGTH

ELLIPSIS = "..."
BLOG_ID_ALPHABET = ascii_letters + digits + "_-"

_WHITESPACE_RUN = re_compile(r"\s+")
_BLOG_ID_PATTERN = re_compile(rf"^[A-Za-z0-9_-]{{1,{MAX_BLOG_ID_LENGTH}}}$")


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def get_summary(request: Request) -> str | None:
    """Return the summary of the API route matching the request, if any."""
    scope = request.scope
    for route in scope["app"].routes:
        if isinstance(route, APIRoute) and route.matches(scope)[0] == Match.FULL:
            return route.summary
    return None


def utc_now() -> datetime:
    """Return the current timezone-aware UTC time."""
    return datetime.now(tz=UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from stores that drop the offset."""
    return value.replace(tzinfo=UTC) if value.tzinfo is None else value.astimezone(UTC)


def generate_excerpt(content: str | None, limit: int = EXCERPT_LIMIT) -> str:
    """
    Generate a short preview of blog content.

    Whitespace runs (including newlines) collapse to a single space and the
    result is stripped. Text longer than ``limit`` is cut to ``limit - 3``
    characters followed by ``...`` so the excerpt never exceeds ``limit``.

    Args:
        content: The full content. ``None`` is treated as empty.
        limit: Maximum excerpt length including the ellipsis.

    Returns:
        str: The excerpt.

    Examples:
    --------
    >>> generate_excerpt("hello \\n  world")
    'hello world'
    """
    flat = _WHITESPACE_RUN.sub(" ", content or "").strip()
    if len(flat) > limit:
        return flat[: limit - len(ELLIPSIS)] + ELLIPSIS
    return flat


def new_blog_id(length: int = BLOG_ID_LENGTH) -> str:
    """Return a random URL-safe blog identifier."""
    return "".join(choice(BLOG_ID_ALPHABET) for _ in range(length))


def is_valid_blog_id(blog_id: str) -> bool:
    """Check that ``blog_id`` has the shape produced by :func:`new_blog_id`."""
    return bool(_BLOG_ID_PATTERN.fullmatch(blog_id))


def today_str() -> str:
    """Return the current UTC time as an ISO 8601 string."""
    return utc_now().isoformat()
