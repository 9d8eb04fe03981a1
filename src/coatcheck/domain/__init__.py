"""Domain layer — coats, guests, the coat room and its notifications.

This layer depends only on stdlib.
It must never import from services, plugins, commands, or config.
"""

from coatcheck.domain.coats import Coat, Guest
from coatcheck.domain.errors import InvalidArgumentError
from coatcheck.domain.events import EventChannel, GuestEvent, GuestHandler
from coatcheck.domain.room import CoatRoom
from coatcheck.domain.storage import CoatStorage

__all__ = [
    "Coat",
    "CoatRoom",
    "CoatStorage",
    "EventChannel",
    "Guest",
    "GuestEvent",
    "GuestHandler",
    "InvalidArgumentError",
]
