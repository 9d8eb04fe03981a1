"""Render ServiceResult for humans (Rich) or machines (``--json``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from coatcheck.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from coatcheck.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if settings.quiet:
        return f"OK: {result.op}"
    return render_result(result)


def render_result(result: ServiceResult) -> str:
    console = create_console()
    renderer = _OP_RENDERERS.get(result.op, _render_generic)
    renderer(result, console)
    return get_output(console).rstrip("\n")


def _coat_cell(coat_type: str | None) -> Text:
    if coat_type is None:
        return Text("-", style="cc.none")
    return Text(coat_type, style="cc.coat")


def _render_scenario(result: ServiceResult, console: Console) -> None:
    data = result.data
    for line in data.get("narration", []):
        console.print(Text(line))

    console.print()
    venue = data.get("venue")
    if venue:
        console.print(Text(venue, style="cc.venue"))

    coats = Table(title="Coat room", title_justify="left", show_edge=False)
    coats.add_column("Owner", style="cc.guest")
    coats.add_column("Coat")
    for row in data.get("stored_coats", []):
        coats.add_row(row["owner"], _coat_cell(row["coat_type"]))
    console.print(coats)

    guests = Table(title="Guests present", title_justify="left", show_edge=False)
    guests.add_column("Name", style="cc.guest")
    guests.add_column("Holding")
    for row in data.get("present_guests", []):
        guests.add_row(row["name"], _coat_cell(row["coat_type"]))
    console.print(guests)


def _render_generic(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="cc.ok"), Text(result.op, style="cc.op"))
    for key, value in result.data.items():
        console.print(Text(f"  {key}: {_short(value)}"))


def _short(value: Any) -> str:
    if isinstance(value, list):
        return f"{len(value)} item(s)"
    return str(value)


_OP_RENDERERS = {
    "run_scenario": _render_scenario,
}
