"""Interactive query loop — one Bacon-number query per input line."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from baconctl.domain.records import strip_newline

if TYPE_CHECKING:
    from baconctl.commands._context import AppContext


def run_queries(app: AppContext, lines: Iterable[str]) -> int:
    """Answer each query line until the exit token or end of input.

    Returns the process exit status: 1 if any query named an unknown
    actor, else 0. A failed query never stops the loop.
    """
    exit_token = app.settings.search.exit_token
    service = app.bacon_service()
    status = 0
    for line in lines:
        query = strip_newline(line)
        if query == exit_token:
            break
        if not app.emit(service.score(query)):
            status = 1
    return status
