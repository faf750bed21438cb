"""GraphStore — actor/movie bipartite graph backed by NetworkX.

Built once per invocation from the movie file, then read by every query.
Actors are keyed by exact name and movies by a store-assigned id, so
lookup-or-create is a dict probe rather than a list scan.

Each membership is a single undirected edge between an actor node and a
movie node: the actor's movie set and the movie's cast are the two
adjacency views of that one edge, so they can never disagree.

Neighbor iteration is most-recently-linked first. BFS expansion and path
reconstruction both go through :meth:`movies_of` / :meth:`cast_of`, which
keeps the printed path identical to the one the search discovered.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

import networkx as nx

from baconctl.domain.models import ACTOR, MOVIE, Actor, Movie

_Graph: TypeAlias = nx.Graph


class GraphStore:
    """In-memory actor/movie graph with per-actor search state."""

    def __init__(self) -> None:
        self._graph: _Graph = nx.Graph()
        self._actors: dict[str, Actor] = {}
        self._movies: list[Movie] = []

    @property
    def graph(self) -> _Graph:
        """The underlying bipartite graph (``bipartite`` attr: 0 actor, 1 movie)."""
        return self._graph

    @property
    def actor_count(self) -> int:
        return len(self._actors)

    @property
    def movie_count(self) -> int:
        return len(self._movies)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def find_or_create_actor(self, name: str) -> Actor:
        """Return the actor named *name*, registering a new one if needed."""
        actor = self._actors.get(name)
        if actor is None:
            actor = Actor(name)
            self._actors[name] = actor
            self._graph.add_node(
                actor.key, kind=ACTOR, bipartite=0, name=name, visited=False, parent=None
            )
        return actor

    def create_movie(self, title: str) -> Movie:
        """Register a new movie. Duplicate titles are never merged."""
        movie = Movie(id=len(self._movies), title=title)
        self._movies.append(movie)
        self._graph.add_node(movie.key, kind=MOVIE, bipartite=1, title=title)
        return movie

    def link(self, actor: Actor, movie: Movie) -> None:
        """Record that *actor* is in the cast of *movie*.

        Relinking an existing pair moves it to the most recently linked
        position on both sides, so a repeated cast line is searched first.
        """
        if actor.key not in self._graph or movie.key not in self._graph:
            msg = f"Cannot link unregistered entities {actor!r} and {movie!r}"
            raise KeyError(msg)
        if self._graph.has_edge(actor.key, movie.key):
            self._graph.remove_edge(actor.key, movie.key)
        self._graph.add_edge(actor.key, movie.key)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_actor(self, name: str) -> Actor | None:
        """Exact-match lookup; None when no actor has that name."""
        return self._actors.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._actors

    def actors(self) -> Iterator[Actor]:
        """All actors, most recently registered first."""
        return reversed(list(self._actors.values()))

    def movies(self) -> Iterator[Movie]:
        """All movies, most recently declared first."""
        return reversed(self._movies)

    def movies_of(self, actor: Actor) -> list[Movie]:
        """Movies *actor* appears in, most recently linked first."""
        return [self._movies[key[1]] for key in reversed(list(self._graph.adj[actor.key]))]

    def cast_of(self, movie: Movie) -> list[Actor]:
        """Actors in *movie*, most recently linked first."""
        return [self._actors[key[1]] for key in reversed(list(self._graph.adj[movie.key]))]

    def in_cast(self, actor: Actor, movie: Movie) -> bool:
        return self._graph.has_edge(actor.key, movie.key)

    # ------------------------------------------------------------------
    # Search state
    # ------------------------------------------------------------------

    def reset_search_state(self) -> None:
        """Clear ``visited`` and ``parent`` on every actor."""
        for actor in self._actors.values():
            attrs = self._graph.nodes[actor.key]
            attrs["visited"] = False
            attrs["parent"] = None

    def mark_visited(self, actor: Actor, parent: Actor | None = None) -> None:
        attrs = self._graph.nodes[actor.key]
        attrs["visited"] = True
        attrs["parent"] = parent.name if parent is not None else None

    def is_visited(self, actor: Actor) -> bool:
        return bool(self._graph.nodes[actor.key]["visited"])

    def parent_of(self, actor: Actor) -> Actor | None:
        """The actor *actor* was discovered from in the last search, if any."""
        parent = self._graph.nodes[actor.key]["parent"]
        return self._actors[parent] if parent is not None else None
