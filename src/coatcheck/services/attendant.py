"""Attendant — stateless handlers for guest arrival and departure.

The handlers only talk to the room through the CoatStorage capability
carried on the event, so any storage backend works unchanged.

Coats are returned to the first stored coat whose owner string equals the
departing guest's name. Two guests sharing a name are not told apart: the
earliest stored coat wins regardless of who deposited it.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

import click

from coatcheck.domain.errors import InvalidArgumentError

if TYPE_CHECKING:
    from coatcheck.domain.coats import Coat
    from coatcheck.domain.events import GuestEvent
    from coatcheck.domain.room import CoatRoom
    from coatcheck.domain.storage import CoatStorage

logger = logging.getLogger(__name__)

GREETING = "Greetings {name}. Do you have any coat that I can take?"
COAT_DEPOSITED = "Your coat has been deposited in the coat room. Enjoy your visit!"
ENJOY_VISIT = "Enjoy your visit!"
WELCOME_BACK = "Welcome back {name}. Do you have any coat we need to return to you?"
COAT_RETURNED = "Here's your coat. Goodbye and we hope you've enjoyed the visit!"
FAREWELL = "Goodbye, and we hope you've enjoyed the visit!"

_narration: ContextVar[list[str] | None] = ContextVar("_narration", default=None)


@contextmanager
def capture_narration() -> Generator[list[str]]:
    """Collect narration lines instead of echoing them to stdout."""
    lines: list[str] = []
    token = _narration.set(lines)
    try:
        yield lines
    finally:
        _narration.reset(token)


def _say(message: str) -> None:
    lines = _narration.get()
    if lines is None:
        click.echo(message)
    else:
        lines.append(message)


def _require_storage(event: GuestEvent) -> CoatStorage:
    if event.storage is None:
        raise InvalidArgumentError("event.storage")
    return event.storage


def greet_guest_and_take_coat(event: GuestEvent) -> None:
    """Greet the arriving guest and check in their coat, if any."""
    storage = _require_storage(event)
    guest = event.guest
    _say(GREETING.format(name=guest.name))

    coat = guest.coat
    if coat is None:
        _say(ENJOY_VISIT)
        return

    storage.add_coat(coat)
    guest.leave_coat()
    logger.debug("Checked in %s for %s", coat.coat_type, guest.name)
    _say(COAT_DEPOSITED)


def find_coat_for(storage: CoatStorage, owner: str) -> Coat | None:
    """First stored coat whose owner equals *owner*, in insertion order."""
    return next((c for c in storage.retrieve_coats() if c.owner == owner), None)


def farewell_guest_and_return_coat(event: GuestEvent) -> None:
    """Welcome the departing guest back and hand over their stored coat."""
    storage = _require_storage(event)
    guest = event.guest
    _say(WELCOME_BACK.format(name=guest.name))

    coat = find_coat_for(storage, guest.name)
    if coat is None:
        _say(FAREWELL)
        return

    storage.remove_coat(coat)
    guest.get_coat(coat)
    logger.debug("Returned %s to %s", coat.coat_type, guest.name)
    _say(COAT_RETURNED)


def attach(room: CoatRoom) -> None:
    """Subscribe both attendant handlers to *room*."""
    room.guest_came_event.subscribe(greet_guest_and_take_coat)
    room.guest_left_event.subscribe(farewell_guest_and_return_coat)


def detach(room: CoatRoom) -> None:
    """Undo :func:`attach`."""
    room.guest_came_event.unsubscribe(greet_guest_and_take_coat)
    room.guest_left_event.unsubscribe(farewell_guest_and_return_coat)
