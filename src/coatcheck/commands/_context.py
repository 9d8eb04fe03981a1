"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging and owns result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from coatcheck.config.logging import configure_logging
from coatcheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from coatcheck.config.settings import CoatcheckSettings
    from coatcheck.plugins.manager import PluginManager
    from coatcheck.services.result import ServiceResult


class AppContext:
    """Settings plus lazily loaded plugins, shared by every command."""

    def __init__(self, settings: CoatcheckSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager | None:
        """Entry-point plugins, or None when ``[plugins] enabled = false``."""
        if not self.settings.plugins.enabled:
            return None
        if self._plugins is None:
            from coatcheck.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load()
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Write *result*; failures go to stderr and exit with code 1."""
        output = format_result(
            result,
            settings=OutputSettings(
                json_output=self.settings.json_output,
                quiet=self.settings.quiet,
            ),
        )
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
