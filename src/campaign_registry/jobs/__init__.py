# ABOUTME: Deferred work queued by lifecycle operations
# ABOUTME: Exposes resave job models and queue implementations

from .queue import DatabaseJobQueue, InMemoryJobQueue, JobQueue, ResaveCriteria, ResaveElementsJob

__all__ = [
    "DatabaseJobQueue",
    "InMemoryJobQueue",
    "JobQueue",
    "ResaveCriteria",
    "ResaveElementsJob",
]
