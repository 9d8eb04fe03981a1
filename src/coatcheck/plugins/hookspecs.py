"""Pluggy hook specifications for coat-room observers.

Hooks run synchronously inside the room's notification, after the
attendant, so they see the coat already stored or returned.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("coatcheck")


class CoatcheckHookSpec:
    """Hook specifications for the coatcheck plugin system."""

    @hookspec
    def guest_arrived(self, guest_name: str, stored_coats: int) -> None:
        """Called after a guest has arrived and been attended to."""

    @hookspec
    def guest_departed(self, guest_name: str, coat_type: str | None) -> None:
        """Called after a guest has left; *coat_type* is what they now hold."""
