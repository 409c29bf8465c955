# ABOUTME: Database operations and data persistence layer
# ABOUTME: SQLModel tables plus the session and transaction manager

"""
Persistence Layer: Tables and transaction boundaries

This layer handles:
- SQLModel tables for campaign types, field layouts, campaigns, and queued jobs
- Async engine and session management
- The single transaction boundary shared by every write in a lifecycle operation
"""

from .json_types import PydanticJson
from .manager import DatabaseManager
from .models import CampaignRecord, CampaignTypeRecord, FieldLayoutRecord, QueuedJob

__all__ = [
    "DatabaseManager",
    "CampaignRecord",
    "CampaignTypeRecord",
    "FieldLayoutRecord",
    "QueuedJob",
    "PydanticJson",
]
