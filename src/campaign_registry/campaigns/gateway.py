# ABOUTME: Gateway for campaign content entities owned by campaign types
# ABOUTME: Queries and deletes campaigns inside the caller's session

from __future__ import annotations

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from campaign_registry.persistence.models import CampaignRecord
from campaign_registry.utils.logging import get_logger


class CampaignGateway:
    """Query and deletion pathway for campaigns."""

    def __init__(self) -> None:
        self.logger = get_logger(__name__)

    async def find_by_campaign_type_id(self, session: AsyncSession, campaign_type_id: int) -> list[CampaignRecord]:
        """Return every campaign of a campaign type, enabled or not."""
        statement = (
            select(CampaignRecord)
            .where(CampaignRecord.campaign_type_id == campaign_type_id)
            .order_by(CampaignRecord.id)
        )
        result = await session.exec(statement)
        return list(result.all())

    async def save_element(self, session: AsyncSession, campaign: CampaignRecord) -> CampaignRecord:
        session.add(campaign)
        await session.flush()
        return campaign

    async def delete_element(self, session: AsyncSession, campaign: CampaignRecord) -> None:
        await session.delete(campaign)
        await session.flush()
        self.logger.debug(
            "Deleted campaign", campaign_id=campaign.id, campaign_type_id=campaign.campaign_type_id
        )
