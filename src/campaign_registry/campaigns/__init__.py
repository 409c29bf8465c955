# ABOUTME: Campaign content entities
# ABOUTME: Exposes the gateway used to find and delete campaigns by campaign type

from .gateway import CampaignGateway

__all__ = ["CampaignGateway"]
