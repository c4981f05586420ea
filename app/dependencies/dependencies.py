# app/dependencies/dependencies.py

"""Application dependencies resolved from the objects built at startup."""

from dataclasses import dataclass
from typing import Annotated, Any

from fastapi import Depends, Request
from orjson import JSONDecodeError, loads
from starlette.datastructures import UploadFile

from app.errors.validation import ValidationError
from app.repositories import BlogRepository
from app.services.blog import BlogService
from app.services.storage import MediaStore

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def get_blog_repository(request: Request) -> BlogRepository:
    """
    Resolve the `BlogRepository` built by the lifespan.

    Parameters
    ----------
    request : Request
        Incoming request.

    Returns
    -------
    BlogRepository
        Repository stored on ``app.state``.
    """
    return request.app.state.blog_repository


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_media_store(request: Request) -> MediaStore:
    """Resolve the `MediaStore` built by the lifespan."""
    return request.app.state.media_store


MediaStoreDep = Annotated[MediaStore, Depends(get_media_store)]


def get_blog_service(repo: BlogRepoDep, media_store: MediaStoreDep) -> BlogService:
    return BlogService(repo, media_store)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]


@dataclass(frozen=True)
class BlogForm:
    """
    Blog write payload, parsed from a JSON or a form body.

    Parameters
    ----------
    heading : str
        Post heading, possibly empty.
    content : str
        Post body, possibly empty.
    image_url : str
        External image URL, possibly empty.
    image_file : UploadFile | None
        Uploaded image, when a non-empty file part was sent.
    """

    heading: str = ""
    content: str = ""
    image_url: str = ""
    image_file: UploadFile | None = None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


async def get_blog_form(request: Request) -> BlogForm:
    """
    Await the request body once and extract the blog fields.

    Multipart and urlencoded bodies are read as forms; anything else is
    parsed as JSON. An empty body yields an empty form.

    Raises
    ------
    ValidationError
        If a JSON body cannot be decoded.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        image_file = form.get("imageFile")
        if not isinstance(image_file, UploadFile) or not image_file.filename:
            image_file = None
        return BlogForm(
            heading=_text(form.get("heading")),
            content=_text(form.get("content")),
            image_url=_text(form.get("imageUrl")),
            image_file=image_file,
        )

    body = await request.body()
    if not body.strip():
        return BlogForm()

    try:
        payload = loads(body)
    except JSONDecodeError as e:
        raise ValidationError(detail="Request body must be valid JSON") from e

    if not isinstance(payload, dict):
        return BlogForm()
    return BlogForm(
        heading=_text(payload.get("heading")),
        content=_text(payload.get("content")),
        image_url=_text(payload.get("imageUrl")),
    )


BlogFormDep = Annotated[BlogForm, Depends(get_blog_form)]
