"""JSON rendering of tool outputs.

Why JSON text:
- MCP tool results are text content; callers parse it back.
- A single renderer keeps key casing and indentation identical across tools.
"""

from __future__ import annotations

import json
from typing import Sequence

from tmdb_mcp.core.domain.models import ToolOutput


def render_tool_output(payload: ToolOutput | Sequence[ToolOutput]) -> str:
    """Serialize one output model (or a list of them) to indented JSON."""

    if isinstance(payload, ToolOutput):
        data = payload.model_dump(mode="json", by_alias=True)
    else:
        data = [item.model_dump(mode="json", by_alias=True) for item in payload]
    return json.dumps(data, ensure_ascii=False, indent=2)
