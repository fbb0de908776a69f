"""Plain-text order digest for chat and e-mail hand-off."""

from __future__ import annotations

from jerseyorders.models.options import DisplayOptions
from jerseyorders.models.result import PipelineResult
from jerseyorders.models.summary import AnalysisSummary, SizeTally
from jerseyorders.pipeline.aggregator import sum_tallies
from jerseyorders.pipeline.sizes import format_size_for_display

RULE = "========"


def _breakdown(tally: SizeTally, summary: AnalysisSummary) -> str:
    text = ""
    if summary.has_long_in_summary and summary.has_short_in_summary:
        text += f" (LONG = {tally.long}, SHORT = {tally.short})"
    elif summary.has_long_in_summary:
        text += f" (LONG = {tally.long})"
    elif summary.has_short_in_summary:
        text += f" (SHORT = {tally.short})"
    if summary.has_rib_in_summary:
        text += f" | RIB = {tally.rib}"
    if summary.has_pant_in_summary:
        text += f" | PANT = {tally.pant}"
    return text


def render_text(result: PipelineResult, options: DisplayOptions) -> str:
    summary = result.summary
    lines = [
        f"Party Name: {options.display_party_name}",
        f"Jersey Type: {options.jersey_type}",
        f"Fabrics: {options.fabrics_type}",
        f"Sleeve: {summary.sleeve_info}",
        f"RIB: {summary.rib_info}",
        f"PANT: {summary.pant_info}",
        "",
        "SUMMARY:",
        RULE,
    ]

    totals = sum_tallies(result.tallies.values())
    for size, tally in result.tallies.items():
        lines.append(f"{format_size_for_display(size)}: {tally.total} pcs{_breakdown(tally, summary)}")

    lines += ["", f"TOTAL: {totals.total} pcs{_breakdown(totals, summary)}", "", "DETAILS:", RULE, ""]

    for size, rows in result.grouped_valid_rows().items():
        lines.append(f"{format_size_for_display(size)}:")
        for idx, row in enumerate(rows, start=1):
            entry = []
            if summary.has_items.name and row.name:
                entry.append(row.name)
            if summary.has_items.number and row.number:
                entry.append(f"[{row.number}]")
            lines.append(f"  {idx}. {' '.join(entry)}".rstrip())
        lines.append("")

    if result.invalid_count:
        lines += ["", f"INVALID ROWS: {result.invalid_count}"]
    return "\n".join(lines) + "\n"


class TextRenderer:
    """IRenderer producing the plain-text digest."""

    media_type = "text/plain"

    def render(self, result: PipelineResult, options: DisplayOptions) -> str:
        return render_text(result, options)
