# ABOUTME: Database manager for async SQLAlchemy engine and session lifecycle
# ABOUTME: Owns table creation and the explicit transaction boundary used by services

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from campaign_registry.config import get_config
from campaign_registry.utils.logging import get_logger


class DatabaseManager:
    """Manages the async engine and hands out sessions and transactions."""

    def __init__(self, database_url: str | None = None, echo: bool | None = None):
        """Initialize the database manager.

        Args:
            database_url: SQLAlchemy async database URL, defaults to the configured one
            echo: Log emitted SQL, defaults to the configured setting
        """
        config = get_config()
        self.database_url = database_url or config.database_url
        self.logger = get_logger(__name__)
        self.engine = create_async_engine(
            self.database_url,
            echo=config.database_echo if echo is None else echo,
        )
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Allow access to attributes after commit
        )

    async def create_tables(self) -> None:
        """Create all database tables if they don't exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session for reads. Nothing is committed."""
        async with self.async_session() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session whose work commits as one unit.

        Usage:
            async with db.transaction() as session:
                # every write made through session commits together

        Any exception rolls the whole unit back and is re-raised unchanged.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                self.logger.warning("Transaction rolled back")
                raise
