# ABOUTME: Domain models for campaign types, their field layouts, and pending contacts
# ABOUTME: CampaignType carries its own validation rules and error bookkeeping

import re
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr

HANDLE_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_]*$")

RESERVED_HANDLES = frozenset(
    word.lower() for word in ("id", "uid", "title", "slug", "status", "enabled", "dateCreated", "dateUpdated")
)

MAX_NAME_LENGTH = 255
MAX_HANDLE_LENGTH = 64


class FieldLayoutField(BaseModel):
    """A custom field placed on a field layout tab."""

    handle: str = Field(description="Programmatic handle of the custom field")
    name: str = Field(description="Display label of the custom field")
    required: bool = Field(default=False, description="Whether a value must be supplied")
    sort_order: int = Field(default=0, description="Position within the tab")


class FieldLayoutTab(BaseModel):
    """A named group of fields on a field layout."""

    name: str = Field(description="Tab label")
    sort_order: int = Field(default=0, description="Position within the layout")
    fields: list[FieldLayoutField] = Field(default_factory=list)


class FieldLayout(BaseModel):
    """Structural definition of the custom attributes attached to a campaign type."""

    id: int | None = Field(default=None, description="Layout ID, unset until saved")
    type: str = Field(default="campaign", description="Element kind the layout applies to")
    tabs: list[FieldLayoutTab] = Field(default_factory=list)

    @property
    def field_handles(self) -> list[str]:
        return [field.handle for tab in self.tabs for field in tab.fields]


class CampaignType(BaseModel):
    """A configuration record governing how a family of campaigns is structured.

    A campaign type without an ``id`` has never been saved. Saving assigns both
    ``id`` and ``field_layout_id``; the ``id`` never changes afterwards.
    """

    id: int | None = Field(default=None, gt=0, description="Campaign type ID, unset until saved")
    name: str = Field(default="", description="Display label")
    handle: str = Field(default="", description="Programmatic identifier, unique among campaign types")
    site_id: int | None = Field(default=None, description="Site the campaign type belongs to")
    field_layout_id: int | None = Field(default=None, description="FK to the field layout")
    uri_format: str | None = Field(default=None, description="URI format for campaign pages")
    html_template: str | None = Field(default=None, description="Template path for HTML output")
    plaintext_template: str | None = Field(default=None, description="Template path for plaintext output")
    query_string_parameters: str | None = Field(default=None, description="Query string appended to links")
    test_contact_id: int | None = Field(default=None, description="Contact used for test sends")
    field_layout: FieldLayout = Field(default_factory=FieldLayout)

    _errors: dict[str, list[str]] = PrivateAttr(default_factory=dict)

    def get_field_layout(self) -> FieldLayout:
        """Return the field layout, bound to ``field_layout_id`` when it has no ID yet."""
        if self.field_layout.id is None and self.field_layout_id is not None:
            self.field_layout.id = self.field_layout_id
        return self.field_layout

    # --- Validation ------------------------------------------------------------------
    @property
    def errors(self) -> dict[str, list[str]]:
        return {attribute: list(messages) for attribute, messages in self._errors.items()}

    def add_error(self, attribute: str, message: str) -> None:
        self._errors.setdefault(attribute, []).append(message)

    def has_errors(self, attribute: str | None = None) -> bool:
        if attribute is None:
            return bool(self._errors)
        return bool(self._errors.get(attribute))

    def clear_errors(self) -> None:
        self._errors.clear()

    def validate(self) -> bool:  # type: ignore[override]
        """Run the campaign type rules, recording any errors.

        Returns:
            True when the campaign type has no validation errors
        """
        self.clear_errors()

        if not self.name.strip():
            self.add_error("name", "Name cannot be blank.")
        elif len(self.name) > MAX_NAME_LENGTH:
            self.add_error("name", f"Name should contain at most {MAX_NAME_LENGTH} characters.")

        if not self.handle:
            self.add_error("handle", "Handle cannot be blank.")
        elif len(self.handle) > MAX_HANDLE_LENGTH:
            self.add_error("handle", f"Handle should contain at most {MAX_HANDLE_LENGTH} characters.")
        elif not HANDLE_PATTERN.match(self.handle):
            self.add_error("handle", f'"{self.handle}" is not a valid handle.')
        elif self.handle.lower() in RESERVED_HANDLES:
            self.add_error("handle", f'"{self.handle}" is a reserved word.')

        if self.site_id is None:
            self.add_error("site_id", "Site cannot be blank.")

        return not self.has_errors()


class PendingContact(BaseModel):
    """A contact awaiting subscription verification. Carries data only."""

    pid: str = Field(description="Pending ID")
    email: str = Field(description="Email address")
    mailing_list_id: int = Field(description="Mailing list the contact asked to join")
    source_url: str | None = Field(default=None, description="URL the subscription came from")
    field_data: dict[str, Any] = Field(default_factory=dict, description="Submitted custom field values")
