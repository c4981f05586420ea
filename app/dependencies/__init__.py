# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    BlogForm,
    BlogFormDep,
    BlogRepoDep,
    BlogServiceDep,
    MediaStoreDep,
    get_blog_form,
    get_blog_repository,
    get_blog_service,
    get_media_store,
)

__all__ = [
    "BlogForm",
    "BlogFormDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "MediaStoreDep",
    "get_blog_form",
    "get_blog_repository",
    "get_blog_service",
    "get_media_store",
]
