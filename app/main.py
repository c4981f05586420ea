# app/main.py

"""Blog CRUD API - blog posts with optional images kept in a media store."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.configs import settings
from app.errors import (
    DatabaseError,
    UploadError,
    ValidationError,
    app_validation_exception_handler,
    database_exception_handler,
    http_exception_handler,
    internal_exception_handler,
    upload_exception_handler,
    validation_exception_handler,
)
from app.middleware import LoggingMiddleware, configure_cors, lifespan
from app.routes import blog_router
from app.schemas import HealthResponse
from app.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Create, list, fetch, update and delete blog posts with optional images.",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    swagger_ui_parameters={"docExpansion": "none", "operationsSorter": "method"},
)

app.add_middleware(LoggingMiddleware)

# Registered after LoggingMiddleware so CORS stays the outermost layer
configure_cors(app)

routes = [blog_router]

_ = [app.include_router(router) for router in routes]

errors = [
    (DatabaseError, database_exception_handler),
    (UploadError, upload_exception_handler),
    (ValidationError, app_validation_exception_handler),
    (RequestValidationError, validation_exception_handler),
    (StarletteHTTPException, http_exception_handler),
    (Exception, internal_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

if settings.STORAGE_PROVIDER == "local":
    settings.UPLOADS_DIR.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.UPLOADS_DIR), name="uploads")


@app.get(
    "/health",
    tags=["Health"],
    summary="Health check endpoint",
    response_model=HealthResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"status": "ok", "time": "2025-01-15T10:30:00.000000+00:00"},
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> HealthResponse:
    """
    Liveness probe.

    Returns
    -------
    HealthResponse
        ``{"status": "ok", "time": <ISO 8601 UTC>}``.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"status": "ok", "time": "2025-01-15T10:30:00.000000+00:00"}
    """
    return HealthResponse(time=today_str())


if __name__ == "__main__":
    from uvicorn import run

    run(app, host=settings.HOST, port=settings.PORT, log_level="info")
