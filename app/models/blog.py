"""Blog database model using SQLModel."""

from datetime import datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import DateTime, Index, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from app.configs.settings import MAX_BLOG_ID_LENGTH
from app.utils.helpers import new_blog_id, utc_now


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    This model represents the blogs table. ``row_id`` is a surrogate key
    that only serves to order posts created within the same instant; the
    public identifier is ``id``.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (Index("ix_blogs_created_row", "created_at", "row_id"),)

    row_id: int | None = Field(
        default=None,
        primary_key=True,
        description="Insertion sequence",
    )

    id: str = Field(
        default_factory=new_blog_id,
        sa_column=Column(String(MAX_BLOG_ID_LENGTH), unique=True, nullable=False, index=True),
        description="Public blog ID",
    )

    # Required fields
    heading: str = Field(
        sa_column=Column(String(300), nullable=False),
        description="Blog heading",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog content",
    )
    excerpt: str = Field(
        default="",
        sa_column=Column(String(200), nullable=False),
        description="Derived preview of the content",
    )

    # Optional image reference
    image_url: str = Field(
        default="",
        sa_column=Column(String(2048), nullable=False),
        description="Image URL (empty when the post has no image)",
    )
    image_public_id: str = Field(
        default="",
        sa_column=Column(String(512), nullable=False),
        description="Media store handle used to delete the image",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "V1StGXR8_Z5j",
                "heading": "My Blog Title",
                "content": "This is the blog content...",
                "excerpt": "This is the blog content...",
                "image_url": "https://res.cloudinary.com/demo/image/upload/v1/blogs/blog-1.jpg",
                "image_public_id": "blogs/blog-1",
            },
        },
    )
