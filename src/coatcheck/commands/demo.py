"""Command: play the coat-room scenario and narrate it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from coatcheck.commands._base import CoatCommand

if TYPE_CHECKING:
    from coatcheck.commands._context import AppContext


@click.command(
    cls=CoatCommand,
    examples="""\
  coatcheck demo
  coatcheck --json demo
  coatcheck -c party.toml demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Run the configured arrivals and departures through the coat room."""
    from coatcheck.services.scenario import ScenarioService

    service = ScenarioService(
        app.settings.scenario,
        venue=app.settings.venue.name,
        plugins=app.plugins,
    )
    app.emit(service.run())
