"""Blog repository for database operations."""

from sqlalchemy import asc, delete, desc, select
from sqlalchemy.exc import SQLAlchemyError

from app.db.database import Database
from app.errors.base import BASE_EXCEPTION
from app.errors.database import PersistenceError
from app.models.blog import BlogDB
from app.monitoring import get_logger
from app.repositories.base import apply_update, build_blog, ensure_valid_id
from app.schemas.blog import BlogCreate, BlogUpdate

logger = get_logger(__name__)

STORE_ERRORS = (SQLAlchemyError, *BASE_EXCEPTION)


class SQLBlogRepository:
    """
    Repository for Blog database operations.

    Each operation runs in its own transaction taken from the shared
    :class:`Database` handle, so a failed write is rolled back and reported
    before the caller moves on.
    """

    def __init__(self, database: Database) -> None:
        """
        Initialize repository with the database handle.

        Args:
            database: Connected database shared by the whole process
        """
        self.database = database

    async def create(self, data: BlogCreate) -> BlogDB:
        """
        Create a new blog post in the database.

        Args:
            data: Blog creation data

        Returns:
            BlogDB: Created blog database model

        Raises:
            ValidationError: If heading or content is empty
            PersistenceError: For database errors
        """
        db_blog = build_blog(data)

        try:
            async with self.database.transaction() as session:
                session.add(db_blog)
                await session.flush()
                await session.refresh(db_blog)
        except STORE_ERRORS as e:
            logger.exception("Failed to insert blog", blog_id=db_blog.id)
            raise PersistenceError(detail="Failed to save blog") from e

        return db_blog

    async def list_all(self) -> list[BlogDB]:
        """
        Get all blogs, newest first.

        Returns:
            list[BlogDB]: Snapshot of every blog at call time
        """
        query = select(BlogDB).order_by(
            # pyrefly: ignore [bad-argument-type]
            desc(BlogDB.created_at),
            # pyrefly: ignore [bad-argument-type]
            asc(BlogDB.row_id),
        )

        try:
            async with self.database.transaction() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except STORE_ERRORS as e:
            logger.exception("Failed to list blogs")
            raise PersistenceError(detail="Failed to load blogs") from e

    async def get_by_id(self, blog_id: str) -> BlogDB | None:
        """
        Get blog by ID.

        Args:
            blog_id: Public blog id

        Returns:
            BlogDB | None: Blog if found, None otherwise
        """
        ensure_valid_id(blog_id)

        try:
            async with self.database.transaction() as session:
                result = await session.execute(
                    # pyrefly: ignore [bad-argument-type]
                    select(BlogDB).where(BlogDB.id == blog_id),
                )
                return result.scalar_one_or_none()
        except STORE_ERRORS as e:
            logger.exception("Failed to load blog", blog_id=blog_id)
            raise PersistenceError(detail="Failed to load blog") from e

    async def delete_by_id(self, blog_id: str) -> BlogDB | None:
        """
        Delete blog by ID.

        A single ``DELETE ... RETURNING`` statement removes and reads the row,
        so two concurrent deletes of one id cannot both see it.

        Args:
            blog_id: Public blog id

        Returns:
            BlogDB | None: The deleted blog, None if not found
        """
        ensure_valid_id(blog_id)

        statement = (
            delete(BlogDB)
            # pyrefly: ignore [bad-argument-type]
            .where(BlogDB.id == blog_id)
            .returning(BlogDB)
            .execution_options(synchronize_session=False)
        )

        try:
            async with self.database.transaction() as session:
                result = await session.execute(statement)
                return result.scalars().first()
        except STORE_ERRORS as e:
            logger.exception("Failed to delete blog", blog_id=blog_id)
            raise PersistenceError(detail="Failed to delete blog") from e

    async def update_by_id(self, blog_id: str, data: BlogUpdate) -> BlogDB | None:
        """
        Update blog fields.

        Args:
            blog_id: Public blog id
            data: Fields to change

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        ensure_valid_id(blog_id)

        try:
            async with self.database.transaction() as session:
                result = await session.execute(
                    # pyrefly: ignore [bad-argument-type]
                    select(BlogDB).where(BlogDB.id == blog_id).with_for_update(),
                )
                db_blog = result.scalar_one_or_none()
                if db_blog is None:
                    return None

                apply_update(db_blog, data)
                await session.flush()
                await session.refresh(db_blog)
                return db_blog
        except STORE_ERRORS as e:
            logger.exception("Failed to update blog", blog_id=blog_id)
            raise PersistenceError(detail="Failed to update blog") from e
