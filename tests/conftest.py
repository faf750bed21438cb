"""Shared pytest fixtures and test helpers for baconctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from baconctl.infrastructure.graph.store import GraphStore
from baconctl.services.telemetry import _current_span, disable_telemetry

APOLLO_FILE = """\
Movie: Apollo 13
Kevin Bacon
Tom Hanks

Movie: Forrest Gump
Tom Hanks
Sally Field
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def movie_file(tmp_path: Path) -> Path:
    """The two-movie Apollo 13 / Forrest Gump cast file on disk."""
    path = tmp_path / "movies.txt"
    path.write_text(APOLLO_FILE, encoding="utf-8")
    return path


@pytest.fixture
def apollo_store() -> GraphStore:
    """Kevin Bacon -> Tom Hanks -> Sally Field."""
    return build_store(
        [
            ("Apollo 13", ["Kevin Bacon", "Tom Hanks"]),
            ("Forrest Gump", ["Tom Hanks", "Sally Field"]),
        ]
    )


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp dir so no stray baconctl.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BACONCTL_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Verbose CLI runs enable telemetry; never leak it into other tests."""
    yield
    disable_telemetry()
    _current_span.set(None)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_store(
    movies: list[tuple[str, list[str]]],
    *,
    orphans: list[str] | None = None,
) -> GraphStore:
    """Build a store from ``(title, cast)`` pairs, in order.

    *orphans* are registered before any movie, so they stay unlinked.
    """
    store = GraphStore()
    for name in orphans or []:
        store.find_or_create_actor(name)
    for title, cast in movies:
        movie = store.create_movie(title)
        for name in cast:
            store.link(store.find_or_create_actor(name), movie)
    return store


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI runs reconfigure logging onto CliRunner streams; undo that."""
    import logging

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    bacon = logging.getLogger("baconctl")
    bacon_level = bacon.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    bacon.setLevel(bacon_level)
