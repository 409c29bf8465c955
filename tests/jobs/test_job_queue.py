# ABOUTME: Tests for resave job models and queue implementations
# ABOUTME: Validates in-memory collection and durable database queueing

import pytest
from sqlmodel import select

from campaign_registry.jobs.queue import DatabaseJobQueue, InMemoryJobQueue, ResaveCriteria, ResaveElementsJob
from campaign_registry.persistence.manager import DatabaseManager
from campaign_registry.persistence.models import QueuedJob


def _job() -> ResaveElementsJob:
    return ResaveElementsJob(
        description="Resaving Newsletter campaigns (site 2)",
        criteria=ResaveCriteria(site_id=1, campaign_type_id=7),
        site_id=2,
    )


def test_job_defaults():
    job = _job()

    assert job.element_type == "campaign"
    assert job.criteria.status is None


@pytest.mark.asyncio
async def test_in_memory_queue_collects_jobs():
    queue = InMemoryJobQueue()

    await queue.push(_job())
    await queue.push(_job())

    assert len(queue.jobs) == 2


@pytest.mark.asyncio
async def test_database_queue_persists_pending_job(temp_db: DatabaseManager):
    queue = DatabaseJobQueue(temp_db)

    await queue.push(_job())

    async with temp_db.session() as session:
        rows = list((await session.exec(select(QueuedJob))).all())

    assert len(rows) == 1
    row = rows[0]
    assert row.status == "pending"
    assert row.job_type == "ResaveElementsJob"
    assert row.description == "Resaving Newsletter campaigns (site 2)"
    assert row.payload["criteria"] == {"site_id": 1, "campaign_type_id": 7, "status": None}
    assert row.payload["site_id"] == 2
    assert ResaveElementsJob.model_validate(row.payload) == _job()
