# ABOUTME: Fields service - owns persistence of field layouts
# ABOUTME: Works inside the caller's session so layout writes join the caller's transaction

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from campaign_registry.core.models import FieldLayout
from campaign_registry.persistence.models import FieldLayoutRecord, utcnow
from campaign_registry.utils.logging import get_logger


class FieldsService:
    """Creates, updates, and deletes field layouts."""

    def __init__(self) -> None:
        self.logger = get_logger(__name__)

    async def get_layout_by_id(self, session: AsyncSession, layout_id: int) -> FieldLayout | None:
        record = await session.get(FieldLayoutRecord, layout_id)
        if record is None:
            return None
        return FieldLayout(id=record.id, type=record.type, tabs=list(record.tabs or []))

    async def save_layout(self, session: AsyncSession, layout: FieldLayout) -> FieldLayout:
        """Insert or update a field layout and assign its ID.

        A layout whose ID no longer resolves is saved as a new layout.

        Args:
            session: Session of the enclosing transaction
            layout: The layout to persist

        Returns:
            The same layout, with ``id`` set
        """
        record = await session.get(FieldLayoutRecord, layout.id) if layout.id is not None else None

        if record is None:
            record = FieldLayoutRecord(type=layout.type, tabs=list(layout.tabs))
        else:
            record.type = layout.type
            record.tabs = list(layout.tabs)
            record.updated_at = utcnow()

        session.add(record)
        await session.flush()

        layout.id = record.id
        self.logger.debug("Saved field layout", field_layout_id=layout.id, tab_count=len(layout.tabs))
        return layout

    async def delete_layout_by_id(self, session: AsyncSession, layout_id: int) -> bool:
        """Delete a field layout. Returns False when no such layout exists."""
        record = await session.get(FieldLayoutRecord, layout_id)
        if record is None:
            return False

        await session.delete(record)
        await session.flush()
        self.logger.debug("Deleted field layout", field_layout_id=layout_id)
        return True
