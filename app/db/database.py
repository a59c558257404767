"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from app.configs import settings
from app.errors.database import DatabaseInitializationError, TransactionError
from app.monitoring import get_logger

logger = get_logger(__name__)


def engine_kwargs(database_url: str) -> dict[str, Any]:
    """
    Build engine keyword arguments suited to the database backend.

    SQLite connections are opened per checkout (no pool) so they never outlive
    the event loop that created them; server databases get a bounded pool.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        return {
            "poolclass": NullPool,
            "connect_args": {"check_same_thread": False},
        }
    return {
        "pool_size": settings.POOL_SIZE,
        "max_overflow": settings.MAX_OVERFLOW,
        "pool_timeout": settings.POOL_TIMEOUT,
        "pool_recycle": settings.POOL_RECYCLE,
        "pool_pre_ping": True,
    }


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection events."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: Any, connection_record: object) -> None:
        # SQLite ignores foreign keys unless asked per connection
        if engine.dialect.name == "sqlite":
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
        logger.debug("New database connection established")


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    **engine_kwargs(settings.DATABASE_URL),
)

_configure_engine_events(engine)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Yields:
        AsyncSession: Database session

    Example:
        ```python
        @app.get("/users")
        async def get_users(session: AsyncSession = Depends(get_session)):
            result = await session.execute(select(UserDB))
            return result.scalars().all()
        ```
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Commits on successful exit, rolls back on exception. A failing commit is
    reported as ``TransactionError``.

    Example:
        ```python
        async with transaction() as session:
            session.add(UserDB(username="test", password_hash="..."))
        ```
    """
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise

        try:
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            logger.exception("Transaction commit failed")
            raise TransactionError(detail=f"Failed to commit transaction: {e}") from e


async def init_db() -> None:
    """
    Create all tables defined in SQLModel models.

    Called on application startup; safe to call repeatedly.
    """
    # Models must be imported for their tables to be registered
    from app.models import BlogDB, UserDB  # noqa: F401, PLC0415

    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except SQLAlchemyError as e:
        logger.exception("Failed to initialize database")
        raise DatabaseInitializationError from e
    logger.info("Database initialized successfully!")


async def drop_db() -> None:
    """Drop all tables. Used by the test suite."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)


async def ping_db() -> bool:
    """Return whether the database answers a trivial query."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database ping failed")
        return False
    return True


async def close_db() -> None:
    """Dispose of the engine's connections on shutdown."""
    await engine.dispose()
    logger.info("Database connections closed")
