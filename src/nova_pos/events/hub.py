"""In-process event hub for ledger change notifications.

The hub keeps a bounded buffer of recent events and calls registered
hooks synchronously, in registration order.
"""

from collections import deque
from collections.abc import Callable

import structlog

from nova_pos.config import get_settings
from nova_pos.events.types import LedgerEvent

logger = structlog.get_logger(__name__)

EventHook = Callable[[LedgerEvent], None]


class EventHub:
    """Fan-out of ledger events to presentation hooks.

    Usage:
        hub = EventHub()
        hub.add_event_hook(lambda event: print(event.to_dict()))
        hub.publish(some_event)
    """

    def __init__(self, buffer_size: int | None = None):
        settings = get_settings()
        self._buffer_size = buffer_size or settings.event_buffer_size
        self._event_buffer: deque[LedgerEvent] = deque(maxlen=self._buffer_size)
        self._event_hooks: list[EventHook] = []
        self._logger = logger.bind(component="event_hub")

    @property
    def recent_events(self) -> list[LedgerEvent]:
        """Get recently published events, oldest first."""
        return list(self._event_buffer)

    @property
    def hook_count(self) -> int:
        return len(self._event_hooks)

    def add_event_hook(self, hook: EventHook) -> None:
        """Add a hook to be called for every event."""
        self._event_hooks.append(hook)

    def remove_event_hook(self, hook: EventHook) -> None:
        """Remove an event hook."""
        if hook in self._event_hooks:
            self._event_hooks.remove(hook)

    def publish(self, event: LedgerEvent) -> None:
        """Buffer an event and deliver it to every hook.

        A hook that raises is logged and skipped; the remaining hooks still
        receive the event.
        """
        self._event_buffer.append(event)
        self._logger.debug("event_published", event_type=event.event_type.value)

        for hook in list(self._event_hooks):
            try:
                hook(event)
            except Exception as e:
                self._logger.error(
                    "event_hook_error",
                    event_type=event.event_type.value,
                    error=str(e),
                )
