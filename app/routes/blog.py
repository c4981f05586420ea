# app/routes/blog.py

"""
Blog Routes.

Provides CRUD endpoints for blog posts with standardized documentation.

Summary
-------
Endpoints include:
  - List blogs
  - Get blog by id
  - Create blog (JSON or multipart with an image file)
  - Update blog (JSON or multipart with an image file)
  - Delete blog

Dependencies
------------
  - `BlogServiceDep`: Blog service bound to the repository and media store
    built at startup.
  - `BlogFormDep`: Blog fields parsed once from a JSON or form body.
"""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from app.dependencies import BlogFormDep, BlogServiceDep
from app.models import BlogDB
from app.schemas import BlogResponse, DeleteResponse

router = APIRouter(prefix="/api/blogs", tags=["Blogs"])

BLOG_EXAMPLE = BlogResponse.model_config["json_schema_extra"]["example"]

ERROR_RESPONSES = {
    400: {
        "description": "Bad request",
        "content": {
            "application/json": {"example": {"error": "heading and content are required"}},
        },
    },
    500: {
        "description": "Internal server error",
        "content": {"application/json": {"example": {"error": "Failed to save blog"}}},
    },
}

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Not found",
        "content": {"application/json": {"example": {"error": "Blog not found"}}},
    },
}

BLOG_BODY = {
    "requestBody": {
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "heading": {"type": "string"},
                        "content": {"type": "string"},
                        "imageUrl": {"type": "string"},
                    },
                },
            },
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "heading": {"type": "string"},
                        "content": {"type": "string"},
                        "imageUrl": {"type": "string"},
                        "imageFile": {"type": "string", "format": "binary"},
                    },
                },
            },
        },
    },
}


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Stored blog entity.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse.model_validate(db_blog)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Retrieve every blog post, newest first.",
    responses={
        200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}},
        500: ERROR_RESPONSES[500],
    },
    operation_id="blogs_list",
)
async def list_blogs(service: BlogServiceDep) -> list[BlogResponse]:
    """
    List all blog posts ordered by creation time, newest first.

    Parameters
    ----------
    service : BlogService
        Blog service dependency.

    Returns
    -------
    list[BlogResponse]
        All stored blog posts.
    """
    return [db_blog_to_response(blog) for blog in await service.list_blogs()]


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a single blog post by its identifier.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Invalid identifier",
            "content": {"application/json": {"example": {"error": "Invalid blog ID"}}},
        },
        **NOT_FOUND_RESPONSE,
        500: ERROR_RESPONSES[500],
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: str, service: BlogServiceDep) -> BlogResponse:
    """
    Get blog by ID.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Blog data.

    Raises
    ------
    InvalidIdError
        If the identifier is malformed.
    NotFoundError
        If no blog has this identifier.
    """
    return db_blog_to_response(await service.get_blog(blog_id))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog post",
    description=(
        "Create a blog post from a JSON body or a multipart form. "
        "An `imageFile` part is uploaded to the media store and its URL "
        "overrides `imageUrl`."
    ),
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        **ERROR_RESPONSES,
    },
    operation_id="blogs_create",
    openapi_extra=BLOG_BODY,
)
async def create_blog(form: BlogFormDep, service: BlogServiceDep) -> BlogResponse:
    """
    Create a blog post.

    Parameters
    ----------
    form : BlogForm
        Parsed request body.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Created blog.

    Raises
    ------
    ValidationError
        If heading or content is missing.
    UploadError
        If the image is rejected or the media store fails.
    PersistenceError
        If the blog cannot be saved; an uploaded image is removed first.
    """
    blog = await service.create_blog(
        heading=form.heading,
        content=form.content,
        image_url=form.image_url,
        image=form.image_file,
    )
    return db_blog_to_response(blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update a blog post",
    description="Update a blog post. Empty fields keep their stored value.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        **ERROR_RESPONSES,
        **NOT_FOUND_RESPONSE,
    },
    operation_id="blogs_update",
    openapi_extra=BLOG_BODY,
)
async def update_blog(
    blog_id: str,
    form: BlogFormDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Update a blog post.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    form : BlogForm
        Parsed request body.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Updated blog.
    """
    blog = await service.update_blog(
        blog_id,
        heading=form.heading,
        content=form.content,
        image_url=form.image_url,
        image=form.image_file,
    )
    return db_blog_to_response(blog)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=DeleteResponse,
    summary="Delete a blog post",
    description=(
        "Delete a blog post. Its stored image is removed best-effort; "
        "a media failure never changes the response."
    ),
    responses={
        200: {"content": {"application/json": {"example": {"success": True}}}},
        400: {
            "description": "Invalid identifier",
            "content": {"application/json": {"example": {"error": "Invalid blog ID"}}},
        },
        **NOT_FOUND_RESPONSE,
        500: ERROR_RESPONSES[500],
    },
    operation_id="blogs_delete",
)
async def delete_blog(blog_id: str, service: BlogServiceDep) -> DeleteResponse:
    """
    Delete a blog post.

    Parameters
    ----------
    blog_id : str
        Blog identifier.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    DeleteResponse
        ``{"success": true}``.
    """
    await service.delete_blog(blog_id)
    return DeleteResponse()
