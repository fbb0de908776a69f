"""JSON export of valid rows grouped by size.

Rejected lines are left out; downstream systems only take accepted orders.
"""

from __future__ import annotations

import json
from typing import Any

from jerseyorders.models.options import DisplayOptions
from jerseyorders.models.result import PipelineResult


def export_groups(result: PipelineResult) -> dict[str, list[dict[str, str]]]:
    """Size → ordered list of ``{NAME, NO, SLEEVE, RIB, PANT}`` records."""
    return {
        size: [
            {"NAME": r.name, "NO": r.number, "SLEEVE": r.sleeve, "RIB": r.rib, "PANT": r.pant}
            for r in rows
        ]
        for size, rows in result.grouped_valid_rows().items()
    }


def render_json(result: PipelineResult, options: DisplayOptions | None = None) -> str:
    # Compact, insertion-ordered output keeps re-runs byte-identical.
    payload: Any = export_groups(result)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


class JSONRenderer:
    """IRenderer producing the grouped JSON export."""

    media_type = "application/json"

    def render(self, result: PipelineResult, options: DisplayOptions) -> str:
        return render_json(result, options)
