"""Bacon search — breadth-first shortest path and path reconstruction.

The search runs over actors only: two actors are adjacent when they share
a movie. Each query first clears every actor's ``visited`` / ``parent``
state, so a query never sees marks left by the previous one.

FIFO order means actors are dequeued in non-decreasing distance, so the
first dequeued match is a shortest chain and the search stops there.
Among equally short chains, the one discovered first in
:meth:`GraphStore.movies_of` / :meth:`GraphStore.cast_of` order wins.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import StrEnum

from baconctl.domain.models import Actor, Hop
from baconctl.infrastructure.graph.store import GraphStore
from baconctl.services.telemetry import trace_span


class SearchStatus(StrEnum):
    """How a search concluded."""

    FOUND = "found"
    NO_SUCH_ACTOR = "no_such_actor"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of :func:`shortest_path`.

    ``actor`` is the matched actor when the query names one that is in
    the graph; it is None for the distance-0 self query when the
    reference actor never appears in the file.
    """

    status: SearchStatus
    distance: int | None = None
    actor: Actor | None = None
    explored: int = 0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


def shortest_path(store: GraphStore, reference_name: str, query_name: str) -> SearchOutcome:
    """Find the Bacon number of *query_name* relative to *reference_name*."""
    store.reset_search_state()

    if query_name == reference_name:
        return SearchOutcome(SearchStatus.FOUND, distance=0, actor=store.find_actor(query_name))

    if store.find_actor(query_name) is None:
        return SearchOutcome(SearchStatus.NO_SUCH_ACTOR)

    reference = store.find_actor(reference_name)
    if reference is None:
        return SearchOutcome(SearchStatus.UNREACHABLE)

    frontier: deque[tuple[Actor, Actor | None, int]] = deque()
    explored = 0
    with trace_span("bfs") as span:
        try:
            frontier.append((reference, None, 0))
            store.mark_visited(reference)
            while frontier:
                actor, _parent, distance = frontier.popleft()
                explored += 1
                if actor.name == query_name:
                    return SearchOutcome(
                        SearchStatus.FOUND, distance=distance, actor=actor, explored=explored
                    )
                for movie in store.movies_of(actor):
                    for costar in store.cast_of(movie):
                        if not store.is_visited(costar):
                            store.mark_visited(costar, parent=actor)
                            frontier.append((costar, actor, distance + 1))
            return SearchOutcome(SearchStatus.UNREACHABLE, explored=explored)
        finally:
            if span:
                span.annotate("explored", explored)
                span.annotate("frontier_left", len(frontier))
            frontier.clear()


def reconstruct_path(store: GraphStore, actor: Actor | None) -> list[Hop]:
    """Walk parent links from *actor* back to the search root.

    Each hop names the current actor and the first movie (in the parent's
    movie order) whose cast contains it. The reference actor itself is not
    emitted; the result is empty when *actor* is the root.
    """
    hops: list[Hop] = []
    if actor is None:
        return hops
    current = actor
    parent = store.parent_of(current)
    while parent is not None:
        movie = next(m for m in store.movies_of(parent) if store.in_cast(current, m))
        hops.append(Hop(actor=current.name, movie=movie.title))
        current, parent = parent, store.parent_of(parent)
    return hops
