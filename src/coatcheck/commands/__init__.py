"""Subcommand modules for coatcheck."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group (deferred imports)."""
    from coatcheck.commands.demo import demo

    cli.add_command(demo)
