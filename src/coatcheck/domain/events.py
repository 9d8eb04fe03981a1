"""Guest notifications — payload type and per-channel handler registry.

Delivery is synchronous and in subscription order. The first handler that
raises aborts the fire; remaining handlers are not invoked.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from coatcheck.domain.errors import InvalidArgumentError

if TYPE_CHECKING:
    from coatcheck.domain.coats import Guest
    from coatcheck.domain.storage import CoatStorage

logger = logging.getLogger(__name__)


class GuestEvent:
    """Notification payload: the storage that emitted it and the guest."""

    __slots__ = ("storage", "guest")

    def __init__(self, storage: CoatStorage | None, guest: Guest) -> None:
        if storage is None:
            raise InvalidArgumentError("storage")
        self.storage: CoatStorage | None = storage
        self.guest = guest

    def __repr__(self) -> str:
        return f"GuestEvent(storage={self.storage!r}, guest={self.guest!r})"


GuestHandler = Callable[[GuestEvent], None]


class EventChannel:
    """Ordered registry of handlers for one notification."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: list[GuestHandler] = []

    def subscribe(self, handler: GuestHandler) -> None:
        """Append *handler*. Subscribing twice delivers twice."""
        self._handlers.append(handler)
        logger.debug("Subscribed %r to %s", handler, self.name)

    def unsubscribe(self, handler: GuestHandler) -> None:
        """Remove the last subscription of *handler*. No-op when absent."""
        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                logger.debug("Unsubscribed %r from %s", handler, self.name)
                return

    @property
    def handlers(self) -> tuple[GuestHandler, ...]:
        return tuple(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def fire(self, event: GuestEvent) -> None:
        """Invoke every handler in order; the first exception propagates."""
        # Snapshot so handlers may (un)subscribe during delivery.
        for handler in tuple(self._handlers):
            handler(event)
