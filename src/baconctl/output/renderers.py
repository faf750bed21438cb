"""Rich renderers — styled score blocks and the graph dump listing.

Each renderer writes to a Rich Console (backed by StringIO) and returns
the rendered text via ``get_output(console)``. Lines are printed with
``soft_wrap`` so long names are never broken, and as ``Text`` objects so
brackets in titles are never read as markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

from baconctl.output.console import create_console, get_output
from baconctl.output.formatters import NO_BACON

if TYPE_CHECKING:
    from rich.console import Console

    from baconctl.infrastructure.graph.store import GraphStore
    from baconctl.services.result import ServiceResult


def _line(console: Console, *parts: Text) -> None:
    console.print(*parts, sep="", soft_wrap=True)


def render_score(result: ServiceResult, *, list_path: bool = False, color: bool = False) -> str:
    """Render a successful ``score`` result with styling."""
    console = create_console(color=color)
    data = result.data
    score = data.get("score")
    label = Text("Score: ", style="bacon.label")

    if score is None:
        _line(console, label, Text(NO_BACON, style="bacon.none"))
        return get_output(console).rstrip("\n")

    _line(console, label, Text(str(score), style="bacon.score"))
    if list_path:
        for hop in data.get("path", []):
            _line(console, Text(hop["actor"], style="bacon.actor"))
            _line(
                console,
                Text("was in ", style="bacon.link"),
                Text(hop["movie"], style="bacon.movie"),
                Text(" with", style="bacon.link"),
            )
        _line(console, Text(data["reference"], style="bacon.actor"))
    return get_output(console).rstrip("\n")


def _dump_rows(store: GraphStore, *, by_movie: bool) -> list[tuple[str, str, str, list[str]]]:
    """Rows of ``(label, name, child_label, child_names)`` for the dump listing."""
    if by_movie:
        return [
            ("Movie", movie.title, "Actor", [a.name for a in store.cast_of(movie)])
            for movie in store.movies()
        ]
    return [
        ("Actor", actor.name, "Movie", [m.title for m in store.movies_of(actor)])
        for actor in store.actors()
    ]


def render_graph_dump(store: GraphStore, *, by_movie: bool = False, color: bool = False) -> str:
    """List the parsed graph, one entity per line with its links indented.

    Actor view::

        Actor: Sally Field
        \tMovie: Forrest Gump

    Movie view (``by_movie``) prints ``Movie:`` headers with ``\\tActor:`` lines.
    Entities and links appear most recent first. Plain output keeps the tab
    indent; Rich expands tabs, so the styled form indents with spaces.
    """
    rows = _dump_rows(store, by_movie=by_movie)
    if not color:
        lines: list[str] = []
        for label, name, child_label, children in rows:
            lines.append(f"{label}: {name}")
            lines.extend(f"\t{child_label}: {child}" for child in children)
        return "\n".join(lines)

    console = create_console(color=True)
    styles = {"Actor": "bacon.actor", "Movie": "bacon.movie"}
    for label, name, child_label, children in rows:
        _line(console, Text(f"{label}: ", style="bacon.label"), Text(name, style=styles[label]))
        for child in children:
            _line(console, Text(f"    {child_label}: "), Text(child, style=styles[child_label]))
    return get_output(console).rstrip("\n")
