# ABOUTME: Shared fixtures for campaign registry tests
# ABOUTME: In-memory SQLite database, in-memory job queue, and a wired campaign types service

from __future__ import annotations

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from campaign_registry.core.events import HookBus
from campaign_registry.core.service import CampaignTypesService
from campaign_registry.jobs.queue import InMemoryJobQueue
from campaign_registry.persistence.manager import DatabaseManager


@pytest_asyncio.fixture
async def temp_db() -> DatabaseManager:
    """Provide an in-memory database manager for async tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    db = DatabaseManager("sqlite+aiosqlite:///:memory:")
    db.engine = engine
    db.async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await db.create_tables()
    yield db
    await db.close()


@pytest.fixture
def job_queue() -> InMemoryJobQueue:
    return InMemoryJobQueue()


@pytest.fixture
def hooks() -> HookBus:
    return HookBus()


@pytest_asyncio.fixture
async def service(temp_db: DatabaseManager, job_queue: InMemoryJobQueue, hooks: HookBus) -> CampaignTypesService:
    return CampaignTypesService(database=temp_db, queue=job_queue, hooks=hooks)
