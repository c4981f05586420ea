from app.services.blog import BlogService
from app.services.storage import CloudinaryStorage, LocalStorage, MediaStore, get_storage_service

__all__ = ["BlogService", "CloudinaryStorage", "LocalStorage", "MediaStore", "get_storage_service"]
