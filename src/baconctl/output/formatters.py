"""Score output helpers.

The query loop prints one block per query. Plain text is the default and
is byte-for-byte the classic protocol::

    Score: 2
    Sally Field
    was in Forrest Gump with
    Tom Hanks
    was in Apollo 13 with
    Kevin Bacon

``--json`` swaps each block for the serialized ServiceResult, and the
``[output] color`` setting routes through the Rich renderers.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from baconctl.services.result import ServiceResult

NO_BACON = "No Bacon!"


def score_lines(result: ServiceResult, *, list_path: bool = False) -> list[str]:
    """Build the stdout lines for a successful ``score`` result."""
    data = result.data
    score = data.get("score")
    if score is None:
        return [f"Score: {NO_BACON}"]

    lines = [f"Score: {score}"]
    if list_path:
        for hop in data.get("path", []):
            lines.append(hop["actor"])
            lines.append(f"was in {hop['movie']} with")
        lines.append(data["reference"])
    return lines


def error_line(result: ServiceResult) -> str:
    """The stderr line for a failed result."""
    return result.error.message if result.error else f"{result.op} failed"


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    list_path: bool = False,
    color: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: Return single-line JSON instead of protocol text.
            Non-ASCII text is kept as is, including undecodable input bytes.
        list_path: Include the connecting chain after the score line.
        color: Style the text output via Rich.
    """
    if json_output:
        return _json.dumps(result.model_dump(), ensure_ascii=False)
    if not result.ok:
        return error_line(result)
    if color:
        from baconctl.output.renderers import render_score

        return render_score(result, list_path=list_path, color=True)
    return "\n".join(score_lines(result, list_path=list_path))
