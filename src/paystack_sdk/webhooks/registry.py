"""One handler slot per event kind."""

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from .events import EventKind, WebhookEvent

logger = logging.getLogger(__name__)

WebhookHandler = Callable[[Any], Union[None, Awaitable[None]]]


def _to_kind(kind: Union[EventKind, str]) -> EventKind:
    try:
        return EventKind(kind)
    except ValueError:
        raise ValueError(f"Unknown webhook event kind: {kind!r}") from None


class HandlerRegistry:
    """Maps each event kind to at most one handler; the last registration wins."""

    def __init__(self):
        self._handlers: Dict[EventKind, WebhookHandler] = {}

    def on(self, kind: Union[EventKind, str], handler: WebhookHandler) -> "HandlerRegistry":
        event_kind = _to_kind(kind)
        if event_kind in self._handlers:
            logger.warning(f"Replacing existing handler for {event_kind.value}")
        self._handlers[event_kind] = handler
        return self

    def off(self, kind: Union[EventKind, str]) -> Optional[WebhookHandler]:
        """Drop the handler for ``kind`` and return it, if one was registered."""
        return self._handlers.pop(_to_kind(kind), None)

    def get(self, kind: Union[EventKind, str]) -> Optional[WebhookHandler]:
        return self._handlers.get(_to_kind(kind))

    def __contains__(self, kind: Union[EventKind, str]) -> bool:
        return self.get(kind) is not None

    def __len__(self) -> int:
        return len(self._handlers)

    async def dispatch(self, event: WebhookEvent) -> bool:
        """Run the handler for ``event`` with its ``data``.

        Returns:
            True if a handler ran, False if none is registered for the kind.
        """
        handler = self._handlers.get(EventKind(event.event))
        if handler is None:
            logger.debug(f"No handler registered for {event.event}")
            return False

        result = handler(event.data)
        if inspect.isawaitable(result):
            await result
        logger.debug(f"Dispatched webhook event {event.event}")
        return True
