# ABOUTME: Business logic and orchestration layer
# ABOUTME: Domain models, lifecycle hooks, and the campaign types service

"""
Core Layer: Campaign type domain and lifecycle orchestration

This layer handles:
- Domain models and their validation rules
- Lifecycle hook notification
- The campaign types service (reads, atomic save, atomic delete)
"""

from .events import CampaignTypeEvent, CampaignTypeEventName, HookBus
from .models import CampaignType, FieldLayout, FieldLayoutField, FieldLayoutTab, PendingContact

# Import service on-demand to avoid circular imports
# Use: from campaign_registry.core.service import CampaignTypesService

__all__ = [
    "CampaignType",
    "CampaignTypeEvent",
    "CampaignTypeEventName",
    "FieldLayout",
    "FieldLayoutField",
    "FieldLayoutTab",
    "HookBus",
    "PendingContact",
]
