# app/middleware/middleware.py
"""
Middleware components for the blog API.

This module contains the request logging middleware and the CORS
configuration. It also contains the lifespan event handler that builds
the database handle, blog repository and media store at startup and
releases them at shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.status import HTTP_200_OK, HTTP_500_INTERNAL_SERVER_ERROR

from app.configs import settings
from app.db import Database
from app.errors import internal_exception_handler
from app.monitoring import bind_request_id, clear_context, configure_logging, get_logger
from app.repositories import build_blog_repository
from app.services.storage import get_storage_service
from app.utils.helpers import get_summary, host

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events with service initialization."""
    configure_logging()
    logger.info("Starting application", app=app.title, version=app.version)

    database: Database | None = None
    try:
        if settings.REPOSITORY_BACKEND == "sql":
            database = Database(settings.DATABASE_URL)
            await database.init_db()

        app.state.database = database
        app.state.blog_repository = build_blog_repository(database)
        app.state.media_store = get_storage_service()

        logger.info(
            "Services initialized successfully",
            repository=settings.REPOSITORY_BACKEND,
            storage=settings.STORAGE_PROVIDER,
            url=f"http://{settings.HOST}:{settings.PORT}",
        )
    except Exception:
        logger.exception("Failed to initialize services")
        if database is not None:
            await database.close()
        raise

    yield

    logger.info("Shutting down application", app=app.title)
    try:
        if database is not None:
            await database.close()
        logger.info("Services cleaned up successfully")
    except Exception:
        logger.exception("Error during service cleanup")


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """CORS middleware answering accepted pre-flight requests with an empty 200."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != HTTP_200_OK:
            return response

        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in ("content-length", "content-type")
        }
        return Response(status_code=HTTP_200_OK, headers=headers)


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=[REQUEST_ID_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging with request-id correlation.

    Unexpected exceptions are rendered as the JSON 500 here, so the
    response still passes back through the CORS layer around this one.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""
        clear_context()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_request_id(request_id)

        start_time = perf_counter()
        route_info = get_summary(request) or f"{request.method} {request.url.path}"
        logger.info("Request", route=route_info, ip=host(request))

        response: Response | None = None
        try:
            response = await call_next(request)
        except Exception as exc:
            response = await internal_exception_handler(request, exc)
        finally:
            logger.info(
                "Response",
                status_code=response.status_code if response else HTTP_500_INTERNAL_SERVER_ERROR,
                method=request.method,
                path=request.url.path,
                duration=f"{perf_counter() - start_time:.3f}s",
            )
            clear_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
