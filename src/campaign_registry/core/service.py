# ABOUTME: Campaign types service - read accessors plus atomic save and delete workflows
# ABOUTME: Coordinates field layouts, campaigns, hooks, and resave jobs around one transaction

from __future__ import annotations

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from campaign_registry.campaigns.gateway import CampaignGateway
from campaign_registry.core.events import CampaignTypeEvent, CampaignTypeEventName, HookBus
from campaign_registry.core.models import CampaignType, FieldLayout
from campaign_registry.fields.service import FieldsService
from campaign_registry.jobs.queue import JobQueue, ResaveCriteria, ResaveElementsJob
from campaign_registry.persistence.manager import DatabaseManager
from campaign_registry.persistence.models import CampaignTypeRecord, utcnow
from campaign_registry.utils.logging import get_logger, with_async_operation_context, with_campaign_type_context


class CampaignTypeNotFoundError(LookupError):
    """Raised when a campaign type ID does not resolve to a stored campaign type."""

    def __init__(self, campaign_type_id: int):
        super().__init__(f"No campaign type exists with the ID '{campaign_type_id}'")
        self.campaign_type_id = campaign_type_id


def _populate_record(record: CampaignTypeRecord, campaign_type: CampaignType) -> None:
    """Copy the campaign type's attributes onto its record. The ID is never copied."""
    record.name = campaign_type.name
    record.handle = campaign_type.handle
    record.site_id = campaign_type.site_id
    record.field_layout_id = campaign_type.field_layout_id
    record.uri_format = campaign_type.uri_format
    record.html_template = campaign_type.html_template
    record.plaintext_template = campaign_type.plaintext_template
    record.query_string_parameters = campaign_type.query_string_parameters
    record.test_contact_id = campaign_type.test_contact_id
    record.updated_at = utcnow()


def _to_model(record: CampaignTypeRecord, layout: FieldLayout | None) -> CampaignType:
    return CampaignType(
        id=record.id,
        name=record.name,
        handle=record.handle,
        site_id=record.site_id,
        field_layout_id=record.field_layout_id,
        uri_format=record.uri_format,
        html_template=record.html_template,
        plaintext_template=record.plaintext_template,
        query_string_parameters=record.query_string_parameters,
        test_contact_id=record.test_contact_id,
        field_layout=layout or FieldLayout(id=record.field_layout_id),
    )


class CampaignTypesService:
    """Reads, saves, and deletes campaign types.

    Save and delete each run as a single transaction covering the field layout,
    the campaign type record, and (on delete) the type's campaigns. Hooks fire
    outside the transaction, and resave jobs are queued only after commit.
    """

    def __init__(
        self,
        database: DatabaseManager,
        queue: JobQueue,
        fields: FieldsService | None = None,
        campaigns: CampaignGateway | None = None,
        hooks: HookBus | None = None,
    ):
        self.database = database
        self.queue = queue
        self.fields = fields or FieldsService()
        self.campaigns = campaigns or CampaignGateway()
        self.hooks = hooks or HookBus()
        self.logger = get_logger(__name__)

    # --- Reads -----------------------------------------------------------------------
    async def get_all_campaign_types(self) -> list[CampaignType]:
        """Return all campaign types ordered by name."""
        async with self.database.session() as session:
            result = await session.exec(select(CampaignTypeRecord).order_by(CampaignTypeRecord.name))
            return [await self._load_model(session, record) for record in result.all()]

    async def get_campaign_type_by_id(self, campaign_type_id: int | None) -> CampaignType | None:
        if not campaign_type_id:
            return None

        async with self.database.session() as session:
            record = await session.get(CampaignTypeRecord, campaign_type_id)
            if record is None:
                return None
            return await self._load_model(session, record)

    async def get_campaign_type_by_handle(self, handle: str) -> CampaignType | None:
        async with self.database.session() as session:
            result = await session.exec(select(CampaignTypeRecord).where(CampaignTypeRecord.handle == handle))
            record = result.first()
            if record is None:
                return None
            return await self._load_model(session, record)

    async def _load_model(self, session: AsyncSession, record: CampaignTypeRecord) -> CampaignType:
        layout = None
        if record.field_layout_id is not None:
            layout = await self.fields.get_layout_by_id(session, record.field_layout_id)
        return _to_model(record, layout)

    # --- Save ------------------------------------------------------------------------
    @with_async_operation_context("save_campaign_type")
    async def save_campaign_type(self, campaign_type: CampaignType, run_validation: bool = True) -> bool:
        """Save a campaign type together with its field layout.

        Args:
            campaign_type: The campaign type to save; gains ``id`` and
                ``field_layout_id`` on success
            run_validation: Whether to validate the campaign type first

        Returns:
            True when saved, False when validation failed

        Raises:
            CampaignTypeNotFoundError: If ``campaign_type.id`` is set but unknown
            sqlalchemy.exc.SQLAlchemyError: If storage fails; nothing is persisted
        """
        is_new = not campaign_type.id
        original_id = campaign_type.id

        await self.hooks.notify(CampaignTypeEventName.BEFORE_SAVE, CampaignTypeEvent(campaign_type, is_new=is_new))

        if run_validation and not campaign_type.validate():
            self.logger.info(
                "Campaign type not saved due to validation error.",
                campaign_type_id=campaign_type.id,
                handle=campaign_type.handle,
                errors=campaign_type.errors,
            )
            return False

        previous_layout_ids = (campaign_type.field_layout_id, campaign_type.field_layout.id)
        layout = campaign_type.get_field_layout()

        with with_campaign_type_context(campaign_type.id, campaign_type.handle):
            try:
                async with self.database.transaction() as session:
                    if not is_new:
                        record = await session.get(CampaignTypeRecord, campaign_type.id)
                        if record is None:
                            raise CampaignTypeNotFoundError(campaign_type.id)
                    else:
                        record = CampaignTypeRecord(name=campaign_type.name, handle=campaign_type.handle)

                    # Campaigns are resaved from the site they were on before this save
                    old_site_id = record.site_id

                    _populate_record(record, campaign_type)

                    await self.fields.save_layout(session, layout)
                    campaign_type.field_layout_id = layout.id
                    record.field_layout_id = layout.id

                    session.add(record)
                    await session.flush()

                    if not campaign_type.id:
                        campaign_type.id = record.id
            except Exception:
                campaign_type.field_layout_id, layout.id = previous_layout_ids
                campaign_type.id = original_id
                raise

        await self.hooks.notify(CampaignTypeEventName.AFTER_SAVE, CampaignTypeEvent(campaign_type, is_new=is_new))

        if not is_new:
            await self._queue_resave(campaign_type, old_site_id)

        return True

    async def _queue_resave(self, campaign_type: CampaignType, old_site_id: int | None) -> None:
        job = ResaveElementsJob(
            description=f"Resaving {campaign_type.name} campaigns (site {campaign_type.site_id})",
            criteria=ResaveCriteria(site_id=old_site_id, campaign_type_id=campaign_type.id, status=None),
            site_id=campaign_type.site_id,
        )
        try:
            await self.queue.push(job)
        except Exception as exc:
            self.logger.error(
                "Failed to queue campaign resave",
                campaign_type_id=campaign_type.id,
                error=str(exc),
                error_type=type(exc).__name__,
            )

    # --- Delete ----------------------------------------------------------------------
    async def delete_campaign_type_by_id(self, campaign_type_id: int) -> bool:
        """Delete a campaign type by ID. Returns False when it does not exist."""
        campaign_type = await self.get_campaign_type_by_id(campaign_type_id)
        if campaign_type is None:
            return False

        return await self.delete_campaign_type(campaign_type)

    @with_async_operation_context("delete_campaign_type")
    async def delete_campaign_type(self, campaign_type: CampaignType) -> bool:
        """Delete a campaign type, its field layout, and all of its campaigns.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If storage fails; nothing is deleted
        """
        await self.hooks.notify(CampaignTypeEventName.BEFORE_DELETE, CampaignTypeEvent(campaign_type))

        with with_campaign_type_context(campaign_type.id, campaign_type.handle) as log:
            async with self.database.transaction() as session:
                if campaign_type.field_layout_id:
                    await self.fields.delete_layout_by_id(session, campaign_type.field_layout_id)

                campaigns = []
                if campaign_type.id is not None:
                    campaigns = await self.campaigns.find_by_campaign_type_id(session, campaign_type.id)
                for campaign in campaigns:
                    await self.campaigns.delete_element(session, campaign)

                record = await session.get(CampaignTypeRecord, campaign_type.id) if campaign_type.id else None
                if record is not None:
                    await session.delete(record)

            log.info("Deleted campaign type", deleted_campaigns=len(campaigns))

        await self.hooks.notify(CampaignTypeEventName.AFTER_DELETE, CampaignTypeEvent(campaign_type))

        return True
