"""
Database Lifecycle Management - Async Version.

A Database owns one engine and its session factory. It is created once
at startup and handed to whatever needs sessions (services, API state,
tests); there is no module-level connection.
"""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from ordering.settings import DatabaseSettings

from .models import Base


logger = logging.getLogger(__name__)


def create_engine(settings: DatabaseSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    Args:
        settings: Database settings

    Returns:
        Configured async engine
    """
    logger.info(f"Creating database engine: {settings.database_url}")

    if settings.is_sqlite:
        return create_async_engine(
            settings.database_url,
            echo=settings.echo_sql,
            connect_args={"check_same_thread": False},  # Required for SQLite
            poolclass=StaticPool,  # SQLite doesn't support connection pooling well
        )

    return create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_pre_ping=settings.pool_pre_ping,
    )


class Database:
    """
    Engine plus session factory.

    Usage:
        database = Database(DatabaseSettings())
        await database.init()
        async with UnitOfWork(database.session_factory) as uow:
            ...
        await database.close()
    """

    def __init__(
        self,
        settings: Optional[DatabaseSettings] = None,
        engine: Optional[AsyncEngine] = None,
    ) -> None:
        self.settings = settings or DatabaseSettings()
        self.engine = engine or create_engine(self.settings)
        self.session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def init(self) -> None:
        """Create all tables if they don't exist."""
        logger.info("Initializing database...")

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("✅ Database initialized successfully")

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def close(self) -> None:
        """Close database connections."""
        logger.info("Closing database connections...")
        await self.engine.dispose()
        logger.info("✅ Database connections closed")
