"""BaseService — foundation for baconctl services.

Every service receives the loaded :class:`GraphStore` at construction
time. The store is built once per invocation and never written to after
loading, apart from the transient per-query search state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from baconctl.infrastructure.graph.store import GraphStore


class BaseService:
    """Base for service-layer classes.

    Usage::

        class BaconService(BaseService):
            def score(self, query: str) -> ServiceResult:
                outcome = shortest_path(self._store, ...)
                ...
    """

    def __init__(self, store: GraphStore) -> None:
        self._store = store
