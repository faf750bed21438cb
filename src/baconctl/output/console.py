"""Rich Console factory and theme for baconctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``render_*() -> str`` contract. Color is opt-in: the buffer is never
a terminal, so styling is emitted only when forced.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BACON_THEME = Theme(
    {
        "bacon.label": "bold",
        "bacon.score": "bold magenta",
        "bacon.none": "bold red",
        "bacon.actor": "bold blue",
        "bacon.movie": "italic cyan",
        "bacon.link": "dim",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Emit ANSI styling even though the buffer is not a TTY.
        width: Override the render width (lines are never wrapped).
    """
    return Console(
        file=StringIO(),
        theme=BACON_THEME,
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
