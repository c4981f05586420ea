from app.schemas.blog import BlogCreate, BlogResponse, BlogUpdate, DeleteResponse, HealthResponse

__all__ = [
    "BlogCreate",
    "BlogResponse",
    "BlogUpdate",
    "DeleteResponse",
    "HealthResponse",
]
