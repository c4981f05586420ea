"""Database engine and session management."""

from asyncio import Lock
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.configs import settings
from app.errors.database import DatabaseConnectionError
from app.monitoring import get_logger

logger = get_logger(__name__)

STATEMENT_TIMEOUT_MS = 30000


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def engine_options(url: str) -> dict[str, Any]:
    """
    Build ``create_async_engine`` keyword arguments for a database URL.

    Pool sizing only applies to server databases; SQLite picks its own pool.
    Statement timeouts are passed through asyncpg's server settings.
    """
    backend = make_url(url).get_backend_name()
    options: dict[str, Any] = {"echo": settings.DATABASE_ECHO, "pool_pre_ping": True}

    if backend == "sqlite":
        return options

    options.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
    )
    if backend == "postgresql":
        options["connect_args"] = {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        }
    return options


class Database:
    """
    Owned database handle.

    Wraps one ``AsyncEngine`` (and its connection pool) plus the session
    factory bound to it. The engine is created at most once per instance:
    concurrent callers of :meth:`connect` wait on the same lock and reuse
    the engine created by whichever caller got there first.

    Example:
        ```python
        database = Database(settings.DATABASE_URL)
        await database.connect()
        async with database.transaction() as session:
            session.add(BlogDB(heading="Hello", content="World"))
        ```
    """

    def __init__(self, url: str | None = None) -> None:
        self.url = url or settings.DATABASE_URL
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None
        self._lock = Lock()

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseConnectionError(detail="Database is not connected")
        return self._engine

    async def connect(self) -> AsyncEngine:
        """
        Create the engine and session factory if they do not exist yet.

        Returns:
            AsyncEngine: The single engine owned by this handle.
        """
        if self._engine is not None:
            return self._engine

        async with self._lock:
            if self._engine is None:
                engine = create_async_engine(self.url, **engine_options(self.url))
                if settings.DEBUG:
                    _configure_engine_events(engine)
                self._session_maker = async_sessionmaker(
                    engine,
                    class_=AsyncSession,
                    expire_on_commit=False,
                    autoflush=False,
                )
                self._engine = engine
                logger.info("Database engine created", backend=engine.dialect.name)

        return self._engine

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Context manager for explicit transaction management.

        Yields:
            AsyncSession: Database session within a transaction that commits
            on successful exit and rolls back on exception.
        """
        await self.connect()
        if self._session_maker is None:
            raise DatabaseConnectionError(detail="Database is not connected")

        async with self._session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                logger.warning("Transaction rolled back")
                raise

    async def init_db(self) -> None:
        """
        Create the tables defined in SQLModel models.

        Called on application startup; the blog schema has no migrations.
        """
        engine = await self.connect()
        async with engine.begin() as conn:
            # Import all models to ensure they are registered
            from app.models import BlogDB  # noqa: F401, PLC0415

            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized successfully")

    async def close(self) -> None:
        """Dispose the engine and release every pooled connection."""
        async with self._lock:
            if self._engine is not None:
                await self._engine.dispose()
                self._engine = None
                self._session_maker = None
                logger.info("Database connections closed")
