"""Actor, Movie, and Hop value types.

Entities are lightweight frozen handles. Their relationships and the
transient search state (``visited`` / ``parent``) live on the nodes of
the :class:`~baconctl.infrastructure.graph.store.GraphStore` graph, so a
handle never owns another handle.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ACTOR = "actor"
MOVIE = "movie"


@dataclass(frozen=True)
class Actor:
    """An actor, identified by exact (case-sensitive) name."""

    name: str

    @property
    def key(self) -> tuple[str, str]:
        return (ACTOR, self.name)


@dataclass(frozen=True)
class Movie:
    """A movie declared by one ``Movie:`` record.

    Titles are not unique: two records with the same title produce two
    movies with distinct ids.
    """

    id: int
    title: str

    @property
    def key(self) -> tuple[str, int]:
        return (MOVIE, self.id)


@dataclass(frozen=True)
class Hop:
    """One step of a Bacon path: *actor* was in *movie* with the next actor."""

    actor: str
    movie: str

    def to_dict(self) -> dict[str, Any]:
        return {"actor": self.actor, "movie": self.movie}
