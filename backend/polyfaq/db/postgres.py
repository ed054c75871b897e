"""Async SQLAlchemy engine and session factory for PostgreSQL.

All database operations use the SQLAlchemy 2.0 async session pattern.
A single Database instance is created in the FastAPI lifespan and stored on
app.state; request handlers get sessions from it via Depends().
Connection errors are re-raised as PersistenceError.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from polyfaq.core.exceptions import PersistenceError

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Database:
    """Owns the async engine and hands out request-scoped sessions."""

    def __init__(self, url: str, **engine_kwargs: object) -> None:
        engine_kwargs.setdefault("echo", False)
        engine_kwargs.setdefault("pool_pre_ping", True)
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        """Create missing tables. There is no migration tooling."""
        # Register models on Base.metadata
        import polyfaq.models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error("postgres_create_all_failed", error=str(e))
            raise PersistenceError(f"Database connection failed: {e}") from e
        logger.info("postgres_schema_ready")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield an async session. Rolls back on exception, always closes."""
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        """Gracefully dispose of the async engine connection pool."""
        logger.info("postgres_shutdown")
        await self.engine.dispose()
