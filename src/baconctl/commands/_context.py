"""AppContext — shared state for one baconctl invocation.

Owns the settings, the loaded graph, and result emission (stdout/stderr
routing). Unlike a one-shot command, the query loop emits many results,
so :meth:`AppContext.emit` reports success instead of exiting; the loop
folds those flags into the final exit status.

All standard streams are UTF-8 with ``surrogateescape``: bytes that are
not valid UTF-8 survive from the movie file or stdin through to output
unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click
import structlog

from baconctl.output.formatters import format_result

if TYPE_CHECKING:
    from pathlib import Path

    from baconctl.config.settings import BaconSettings
    from baconctl.infrastructure.graph.store import GraphStore
    from baconctl.services.bacon import BaconService
    from baconctl.services.result import ServiceResult

log = structlog.get_logger("baconctl.commands")

STREAM_ENCODING = "utf-8"
STREAM_ERRORS = "surrogateescape"


def text_stream(name: str) -> TextIO:
    """The named standard stream, re-wrapped to round-trip raw bytes."""
    return click.get_text_stream(name, encoding=STREAM_ENCODING, errors=STREAM_ERRORS)


class AppContext:
    """Settings, graph, and output routing for a single run."""

    def __init__(self, settings: BaconSettings) -> None:
        self.settings = settings
        self._store: GraphStore | None = None

        from baconctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, log_json=settings.log_json, stream=self.stderr
        )

        if settings.verbose:
            from baconctl.services.telemetry import enable_telemetry

            enable_telemetry()

    # Resolved on each access so a swapped sys.stdout (tests, pagers) is honored.
    @property
    def stdout(self) -> TextIO:
        return text_stream("stdout")

    @property
    def stderr(self) -> TextIO:
        return text_stream("stderr")

    @property
    def store(self) -> GraphStore:
        """The loaded graph. :meth:`load` must have been called."""
        if self._store is None:
            msg = "No movie file loaded"
            raise RuntimeError(msg)
        return self._store

    def load(self, input_file: Path) -> GraphStore:
        """Parse *input_file* into the graph.

        A file that cannot be opened is fatal: the OS error goes to stderr
        and the process exits 1 before any query is read.
        """
        from baconctl.infrastructure.movie_file import load_movie_file

        try:
            self._store = load_movie_file(input_file)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            click.echo(f"Error opening file: {reason}", file=self.stderr)
            raise SystemExit(1) from exc
        log.debug(
            "graph.loaded",
            path=str(input_file),
            actors=self._store.actor_count,
            movies=self._store.movie_count,
        )
        return self._store

    def bacon_service(self) -> BaconService:
        from baconctl.services.bacon import BaconService

        return BaconService(self.store, reference=self.settings.search.reference_actor)

    def emit(self, result: ServiceResult) -> bool:
        """Write *result* and return ``result.ok``.

        * Success: protocol lines (or JSON) to stdout.
        * Failure: the error line to stderr; in JSON mode the serialized
          result goes to stdout as well so every query yields one record.
        """
        output = self.settings.output
        text = format_result(
            result,
            json_output=self.settings.json_output,
            list_path=output.list_path,
            color=output.color,
        )
        if result.ok:
            click.echo(text, file=self.stdout)
        else:
            if self.settings.json_output:
                click.echo(text, file=self.stdout)
                text = format_result(result)
            click.echo(text, file=self.stderr)
        return result.ok
