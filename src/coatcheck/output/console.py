"""Rich Console factory and theme for coatcheck output.

Consoles render into a StringIO buffer so rendering stays a pure
``ServiceResult -> str`` function. Outside a TTY Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

COATCHECK_THEME = Theme(
    {
        "cc.ok": "bold green",
        "cc.error": "bold red",
        "cc.warning": "bold yellow",
        "cc.op": "bold cyan",
        "cc.venue": "bold",
        "cc.guest": "bold blue",
        "cc.coat": "magenta",
        "cc.none": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=COATCHECK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
