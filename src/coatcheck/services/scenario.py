"""ScenarioService — the demo driver.

Builds one CoatRoom, attaches the attendant (and any plugins), plays the
configured arrivals in order, then the departures in order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from coatcheck.domain.coats import Guest
from coatcheck.domain.errors import InvalidArgumentError
from coatcheck.domain.room import CoatRoom
from coatcheck.services import attendant
from coatcheck.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from coatcheck.config.models import ScenarioConfig
    from coatcheck.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def _guest_row(guest: Guest) -> dict[str, Any]:
    return {"name": guest.name, "coat_type": guest.coat.coat_type if guest.coat else None}


class ScenarioService:
    """Run a scripted evening at the coat room.

    Parameters:
        scenario: Arrivals and departures to play.
        venue: Venue name reported in the result.
        plugins: Optional loaded PluginManager; attached after the attendant.
    """

    def __init__(
        self,
        scenario: ScenarioConfig,
        *,
        venue: str = "",
        plugins: PluginManager | None = None,
    ) -> None:
        self._scenario = scenario
        self._venue = venue
        self._plugins = plugins

    def build_room(self) -> CoatRoom:
        room = CoatRoom()
        attendant.attach(room)
        if self._plugins is not None:
            self._plugins.attach(room)
        return room

    def run(self) -> ServiceResult:
        room = self.build_room()
        guests = [Guest(spec.name, spec.coat_type) for spec in self._scenario.guests]
        departed: list[Guest] = []
        brought_coat = {id(g) for g in guests if g.has_coat}

        with attendant.capture_narration() as narration:
            try:
                for guest in guests:
                    room.guest_came(guest)
                for name in self._scenario.departures:
                    guest = self._next_present(room, name)
                    if guest is None:
                        logger.debug("No present guest named %s; skipping departure", name)
                        continue
                    room.guest_left(guest)
                    departed.append(guest)
            except InvalidArgumentError as exc:
                return ServiceResult.failure(
                    "run_scenario",
                    ServiceError(
                        code="INVALID_ARGUMENT",
                        message=str(exc),
                        detail={"argument": exc.argument},
                    ),
                    data={"narration": list(narration)},
                )

        warnings = [
            f"{g.name} went home without a coat"
            for g in departed
            if g.coat is None and id(g) in brought_coat
        ]
        return ServiceResult(
            ok=True,
            op="run_scenario",
            data={
                "venue": self._venue,
                "narration": list(narration),
                "stored_coats": [
                    {"owner": c.owner, "coat_type": c.coat_type} for c in room.retrieve_coats()
                ],
                "present_guests": [_guest_row(g) for g in room.present_guests()],
                "departed_guests": [_guest_row(g) for g in departed],
            },
            warnings=warnings,
        )

    @staticmethod
    def _next_present(room: CoatRoom, name: str) -> Guest | None:
        return next((g for g in room.present_guests() if g.name == name), None)
