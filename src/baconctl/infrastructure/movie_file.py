"""Movie-file loading — read a cast file into a :class:`GraphStore`.

Tokenizing lives in :mod:`baconctl.domain.records`; this module owns the
file handle and the attach-to-latest-movie construction rule.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from baconctl.domain.records import ActorRecord, MovieRecord, Record, iter_records
from baconctl.infrastructure.graph.store import GraphStore

logger = logging.getLogger(__name__)


def build_graph(records: Iterable[Record], store: GraphStore | None = None) -> GraphStore:
    """Feed *records* into *store* (a fresh one by default) and return it.

    Actors attach to the most recently declared movie. Actors seen before
    any movie are registered but left unlinked.
    """
    store = store if store is not None else GraphStore()
    current = None
    for record in records:
        match record:
            case MovieRecord(title=title):
                current = store.create_movie(title)
            case ActorRecord(name=name, line_no=line_no):
                actor = store.find_or_create_actor(name)
                if current is not None:
                    store.link(actor, current)
                else:
                    logger.debug("Actor %r on line %d precedes any movie", name, line_no)
    return store


def load_movie_file(path: Path) -> GraphStore:
    """Parse the movie file at *path*.

    Undecodable bytes are kept as lone surrogates, so names compare and
    print byte for byte whatever the file encoding.

    Raises:
        OSError: The file cannot be opened or read.
    """
    with path.open(encoding="utf-8", errors="surrogateescape", newline="") as fh:
        store = build_graph(iter_records(fh))
    logger.debug(
        "Loaded %s: %d actors, %d movies", path, store.actor_count, store.movie_count
    )
    return store
