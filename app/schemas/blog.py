"""
Blog schemas.

Request and response models for the blog endpoints. Responses use
camelCase field names (``imageUrl``, ``createdAt``) while Python code
works with snake_case attributes.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.utils.helpers import as_utc


class BlogCreate(BaseModel):
    """Blog creation data (excludes generated fields)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    heading: str = ""
    content: str = ""
    image_url: str = ""
    image_public_id: str = ""


class BlogUpdate(BaseModel):
    """Blog update data. ``None`` leaves the stored value unchanged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    heading: str | None = None
    content: str | None = None
    image_url: str | None = None
    image_public_id: str | None = None


class BlogResponse(BaseModel):
    """Blog response model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "V1StGXR8_Z5j",
                "heading": "My Blog Title",
                "content": "This is the blog content...",
                "excerpt": "This is the blog content...",
                "imageUrl": "https://res.cloudinary.com/demo/image/upload/v1/blogs/blog-1.jpg",
                "imagePublicId": "blogs/blog-1",
                "createdAt": "2025-01-15T10:30:00Z",
                "updatedAt": "2025-01-15T10:30:00Z",
            },
        },
    )

    id: str
    heading: str
    content: str
    excerpt: str
    image_url: str = ""
    image_public_id: str = ""
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class DeleteResponse(BaseModel):
    """Response body for a successful delete."""

    success: bool = Field(default=True)


class HealthResponse(BaseModel):
    """Liveness response."""

    status: str = "ok"
    time: str
