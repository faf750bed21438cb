"""BaconService — score one queried actor against the reference actor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from baconctl.services.base import BaseService
from baconctl.services.result import ServiceError, ServiceResult
from baconctl.services.search import SearchStatus, reconstruct_path, shortest_path
from baconctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from baconctl.infrastructure.graph.store import GraphStore

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE = "Kevin Bacon"


class BaconService(BaseService):
    """Answers Bacon-number queries over a loaded graph."""

    def __init__(self, store: GraphStore, *, reference: str = DEFAULT_REFERENCE) -> None:
        super().__init__(store)
        self.reference = reference

    @traced
    def score(self, query: str) -> ServiceResult:
        """Compute the Bacon number of *query*.

        Returns an ok result whose ``score`` is the hop count, or None when
        the actor exists but no chain of shared movies reaches the
        reference actor. An actor name absent from the file is the only
        error (``NO_SUCH_ACTOR``).
        """
        outcome = shortest_path(self._store, self.reference, query)
        logger.debug("Query %r -> %s (distance=%s)", query, outcome.status, outcome.distance)

        if outcome.status is SearchStatus.NO_SUCH_ACTOR:
            return ServiceResult(
                ok=False,
                op="score",
                error=ServiceError(
                    code="NO_SUCH_ACTOR",
                    message=f"No actor named {query} entered",
                    detail={"query": query},
                ),
            )

        path = []
        if outcome.found:
            with trace_span("reconstruct_path"):
                path = [hop.to_dict() for hop in reconstruct_path(self._store, outcome.actor)]

        return ServiceResult(
            ok=True,
            op="score",
            data={
                "query": query,
                "reference": self.reference,
                "score": outcome.distance,
                "path": path,
            },
        )
