# ABOUTME: Hook bus for observing campaign type lifecycle events
# ABOUTME: Pure notification channel - observers react but cannot cancel the operation

from __future__ import annotations

import inspect
from collections import defaultdict
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

from campaign_registry.core.models import CampaignType
from campaign_registry.utils.logging import get_logger


class CampaignTypeEventName(str, Enum):
    """Lifecycle events published by the campaign types service."""

    BEFORE_SAVE = "beforeSaveCampaignType"
    AFTER_SAVE = "afterSaveCampaignType"
    BEFORE_DELETE = "beforeDeleteCampaignType"
    AFTER_DELETE = "afterDeleteCampaignType"


@dataclass(slots=True)
class CampaignTypeEvent:
    """Payload handed to hook handlers."""

    campaign_type: CampaignType
    is_new: bool = False


HookHandler = Callable[[CampaignTypeEvent], Awaitable[None] | None]


class HookBus:
    """Registry of lifecycle observers.

    Handlers run in registration order and may be plain functions or coroutine
    functions. Their return values are ignored. An exception raised by a
    handler propagates to whoever triggered the event.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[HookHandler]] = defaultdict(list)
        self.logger = get_logger(__name__)

    def on(self, name: CampaignTypeEventName | str, handler: HookHandler) -> None:
        self._handlers[_event_key(name)].append(handler)

    def off(self, name: CampaignTypeEventName | str, handler: HookHandler) -> bool:
        """Detach a handler. Returns False when it was not registered."""
        handlers = self._handlers.get(_event_key(name), [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def has_handlers(self, name: CampaignTypeEventName | str) -> bool:
        return bool(self._handlers.get(_event_key(name)))

    async def notify(self, name: CampaignTypeEventName | str, event: CampaignTypeEvent) -> None:
        key = _event_key(name)
        if not self.has_handlers(key):
            return

        self.logger.debug(
            "Notifying hook handlers",
            event=key,
            handler_count=len(self._handlers[key]),
            campaign_type_id=event.campaign_type.id,
            is_new=event.is_new,
        )
        for handler in list(self._handlers[key]):
            result = handler(event)
            if inspect.isawaitable(result):
                await result


def _event_key(name: CampaignTypeEventName | str) -> str:
    return name.value if isinstance(name, CampaignTypeEventName) else name
