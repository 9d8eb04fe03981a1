"""CoatRoom — in-memory coat storage with guest presence tracking."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from coatcheck.domain.errors import InvalidArgumentError
from coatcheck.domain.events import EventChannel, GuestEvent
from coatcheck.domain.storage import CoatStorage

if TYPE_CHECKING:
    from coatcheck.domain.coats import Coat, Guest

logger = logging.getLogger(__name__)


def _remove_first_identical(items: list, target: object) -> bool:
    for index, item in enumerate(items):
        if item is target:
            del items[index]
            return True
    return False


class CoatRoom(CoatStorage):
    """Stores coats and announces guest arrivals and departures.

    Attributes:
        guest_came_event: Channel fired after a guest is added.
        guest_left_event: Channel fired after a guest is removed.
    """

    def __init__(self) -> None:
        self._guests: list[Guest] = []
        self._coats: list[Coat] = []
        self.guest_came_event = EventChannel("guest_came")
        self.guest_left_event = EventChannel("guest_left")

    # ------------------------------------------------------------------
    # Guest presence
    # ------------------------------------------------------------------

    def guest_came(self, guest: Guest) -> None:
        self._guests.append(guest)
        logger.debug("Guest arrived: %s", guest.name)
        self.guest_came_event.fire(GuestEvent(self, guest))

    def guest_left(self, guest: Guest) -> None:
        if not _remove_first_identical(self._guests, guest):
            logger.debug("Guest %s left without being present", guest.name)
        logger.debug("Guest left: %s", guest.name)
        self.guest_left_event.fire(GuestEvent(self, guest))

    def present_guests(self) -> tuple[Guest, ...]:
        return tuple(self._guests)

    # ------------------------------------------------------------------
    # CoatStorage
    # ------------------------------------------------------------------

    def add_coat(self, coat: Coat) -> None:
        if coat is None:
            raise InvalidArgumentError("coat")
        self._coats.append(coat)
        logger.debug("Stored coat of %s (%s)", coat.owner, coat.coat_type)

    def remove_coat(self, coat: Coat) -> None:
        if _remove_first_identical(self._coats, coat):
            logger.debug("Released coat of %s (%s)", coat.owner, coat.coat_type)

    def retrieve_coats(self) -> Sequence[Coat]:
        return tuple(self._coats)
