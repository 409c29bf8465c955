# ABOUTME: SQLModel tables for campaign types, field layouts, campaigns, and queued jobs
# ABOUTME: Each table is the persisted counterpart of a domain model or collaborator

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlmodel import JSON, Column, Field, SQLModel

from campaign_registry.core.models import FieldLayoutTab
from campaign_registry.persistence.json_types import PydanticJson


def utcnow() -> datetime:
    """Returns the current UTC timestamp."""

    return datetime.now(UTC)


class FieldLayoutRecord(SQLModel, table=True):
    """Persisted field layout owned by the fields service."""

    __tablename__ = "field_layout"  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    type: str = Field(default="campaign", description="Element kind the layout applies to")
    tabs: list[FieldLayoutTab] = Field(
        default_factory=list,
        sa_column=Column(PydanticJson(list[FieldLayoutTab])),
        description="Tabs and their fields",
    )
    created_at: datetime = Field(default_factory=utcnow, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=utcnow, description="Last modification timestamp")


class CampaignTypeRecord(SQLModel, table=True):
    """Persisted campaign type."""

    __tablename__ = "campaign_type"  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True, description="Display label")
    handle: str = Field(unique=True, description="Programmatic identifier")
    site_id: int | None = Field(default=None, index=True, description="Site the campaign type belongs to")
    field_layout_id: int | None = Field(
        default=None,
        foreign_key="field_layout.id",
        ondelete="SET NULL",
        description="FK to field_layout.id",
    )
    uri_format: str | None = Field(default=None)
    html_template: str | None = Field(default=None)
    plaintext_template: str | None = Field(default=None)
    query_string_parameters: str | None = Field(default=None)
    test_contact_id: int | None = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=utcnow, description="Last modification timestamp")


class CampaignRecord(SQLModel, table=True):
    """Persisted campaign content belonging to exactly one campaign type."""

    __tablename__ = "campaign"  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    campaign_type_id: int = Field(
        index=True,
        foreign_key="campaign_type.id",
        ondelete="CASCADE",
        description="FK to campaign_type.id",
    )
    site_id: int | None = Field(default=None, index=True)
    title: str = Field(description="Campaign title")
    slug: str | None = Field(default=None)
    enabled: bool = Field(default=True, description="Disabled campaigns are still owned by their type")
    created_at: datetime = Field(default_factory=utcnow, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=utcnow, description="Last modification timestamp")


class QueuedJob(SQLModel, table=True):
    """A unit of deferred work waiting for a queue worker."""

    __tablename__ = "queued_job"  # type: ignore[assignment]

    id: int | None = Field(default=None, primary_key=True)
    description: str = Field(description="Human-readable job description")
    job_type: str = Field(description="Job class name")
    payload: dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON),
        description="Serialized job arguments",
    )
    status: str = Field(default="pending", index=True)
    created_at: datetime = Field(default_factory=utcnow, description="Creation timestamp")
