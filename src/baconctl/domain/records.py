"""Movie-file tokenizer — turn raw lines into movie and actor records.

Pure functions, no I/O. The file format is line oriented::

    Movie: Apollo 13
    Kevin Bacon
    Tom Hanks

    Movie: Forrest Gump
    Tom Hanks
    Sally Field

A line starting with ``Movie: `` declares a movie; any other non-blank
line names an actor in the most recently declared movie.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeAlias

MOVIE_PREFIX = "Movie: "


@dataclass(frozen=True)
class MovieRecord:
    """A ``Movie: <title>`` line."""

    title: str
    line_no: int = 0


@dataclass(frozen=True)
class ActorRecord:
    """An actor-name line."""

    name: str
    line_no: int = 0


Record: TypeAlias = MovieRecord | ActorRecord


def strip_newline(line: str) -> str:
    """Drop a single trailing line terminator, leaving all other text intact."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def parse_line(line: str, line_no: int = 0) -> Record | None:
    """Classify one line. Returns None for blank lines."""
    text = strip_newline(line)
    if not text:
        return None
    if text.startswith(MOVIE_PREFIX):
        return MovieRecord(title=text[len(MOVIE_PREFIX) :], line_no=line_no)
    return ActorRecord(name=text, line_no=line_no)


def iter_records(lines: Iterable[str]) -> Iterator[Record]:
    """Yield records for every non-blank line, in file order."""
    for line_no, line in enumerate(lines, start=1):
        record = parse_line(line, line_no)
        if record is not None:
            yield record
