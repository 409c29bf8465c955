# ABOUTME: Deferred job descriptions and the queues that accept them
# ABOUTME: Resave jobs re-derive campaigns after their campaign type changes

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, Field

from campaign_registry.persistence.manager import DatabaseManager
from campaign_registry.persistence.models import QueuedJob
from campaign_registry.utils.logging import get_logger


class ResaveCriteria(BaseModel):
    """Selects the campaigns a resave job will touch."""

    site_id: int | None = Field(description="Site the campaigns currently belong to")
    campaign_type_id: int = Field(description="Campaign type the campaigns belong to")
    status: str | None = Field(default=None, description="Status filter, None for every status")


class ResaveElementsJob(BaseModel):
    """Resave every element matching ``criteria`` against ``site_id``."""

    description: str
    element_type: str = Field(default="campaign", description="Kind of element to resave")
    criteria: ResaveCriteria
    site_id: int | None = Field(description="Site the elements are resaved for")


class JobQueue(Protocol):
    """Accepts jobs for later execution. Callers never observe a result."""

    async def push(self, job: ResaveElementsJob) -> None:
        ...


class InMemoryJobQueue:
    """Keeps pushed jobs in a list, for embedding and tests."""

    def __init__(self) -> None:
        self.jobs: list[ResaveElementsJob] = []

    async def push(self, job: ResaveElementsJob) -> None:
        self.jobs.append(job)


class DatabaseJobQueue:
    """Writes jobs to the ``queued_job`` table for a worker to pick up.

    Each push commits in its own session, independent of any transaction the
    caller may have had open.
    """

    def __init__(self, database: DatabaseManager):
        self.database = database
        self.logger = get_logger(__name__)

    async def push(self, job: ResaveElementsJob) -> None:
        async with self.database.transaction() as session:
            row = QueuedJob(
                description=job.description,
                job_type=type(job).__name__,
                payload=job.model_dump(mode="json"),
            )
            session.add(row)

        self.logger.info("Queued job", job_type=row.job_type, description=job.description)
