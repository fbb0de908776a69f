"""HTML order sheet: info block, size summary table and detail list."""

from __future__ import annotations

from html import escape

from jerseyorders.models.options import DisplayOptions
from jerseyorders.models.order import OrderRow, ReasonCode
from jerseyorders.models.result import PipelineResult
from jerseyorders.models.summary import AnalysisSummary
from jerseyorders.pipeline.aggregator import sum_tallies
from jerseyorders.pipeline.sizes import format_size_for_display

TABLE_HEADS: tuple[str, ...] = ("NAME", "NUMBER", "SIZE", "SLEEVE", "RIB", "PANT")

# Columns where a literal NO means "not ordered" and shows blank.
_BLANK_WHEN_NO = frozenset({"RIB", "PANT"})


def _summary_columns(summary: AnalysisSummary) -> list[tuple[str, str]]:
    columns = [
        ("LONG", "long", summary.has_long_in_summary),
        ("SHORT", "short", summary.has_short_in_summary),
        ("RIB", "rib", summary.has_rib_in_summary),
        ("PANT", "pant", summary.has_pant_in_summary),
    ]
    return [(label, attr) for label, attr, shown in columns if shown]


def _detail_heads(summary: AnalysisSummary) -> list[str]:
    return [head for head in TABLE_HEADS if summary.has_items.has(head)]


def _cell_value(row: OrderRow, head: str, *, format_size: bool = True) -> str:
    value = row.value(head)
    if head == "SIZE" and format_size:
        value = format_size_for_display(value)
    if head in _BLANK_WHEN_NO and value == "NO":
        return ""
    fallback = "SHORT" if head == "SLEEVE" else "-"
    return escape(value or fallback)


def render_info_items(result: PipelineResult, options: DisplayOptions, *, suffix: str = "") -> str:
    summary = result.summary
    items = [
        ("Party Name", options.display_party_name),
        ("Jersey Type", options.jersey_type),
        ("Fabrics", options.fabrics_type),
        ("Sleeve", summary.sleeve_info),
        ("RIB", summary.rib_info),
        ("PANT", summary.pant_info),
    ]
    return "".join(
        f'<div class="info-item"><span class="info-label">{label}{suffix}</span>'
        f'<span class="info-value">{escape(value)}</span></div>'
        for label, value in items
    )


def render_summary_table(result: PipelineResult) -> str:
    """Per-size totals with a footer of column sums and an invalid-row warning."""
    columns = _summary_columns(result.summary)
    totals = sum_tallies(result.tallies.values())

    parts = ['<table class="resizable-table"><thead><tr><th>SIZE</th><th>TOTAL</th>']
    parts.extend(f"<th>{label}</th>" for label, _ in columns)
    parts.append("</tr></thead><tbody>")

    for size, tally in result.tallies.items():
        parts.append(f"<tr><td>{escape(format_size_for_display(size))}</td><td>{tally.total}</td>")
        parts.extend(f"<td>{getattr(tally, attr)}</td>" for _, attr in columns)
        parts.append("</tr>")

    parts.append(f'<tr class="summary-footer"><td>TOTAL</td><td>{totals.total}</td>')
    parts.extend(f"<td>{getattr(totals, attr)}</td>" for _, attr in columns)
    parts.append("</tr>")

    if result.invalid_count:
        colspan = 2 + len(columns)
        parts.append(
            f'<tr class="warn-row"><td colspan="{colspan}">Invalid Rows: {result.invalid_count}</td></tr>'
        )
    parts.append("</tbody></table>")
    return "".join(parts)


def render_detail_table(result: PipelineResult, options: DisplayOptions) -> str:
    """One row per valid order grouped by size, rejected lines after them."""
    heads = _detail_heads(result.summary)
    serial = 1

    parts = ['<div class="section-header"><h2>Detail List</h2></div>']
    parts.append('<table class="resizable-table"><thead><tr>')
    if options.show_index:
        parts.append("<th>SN</th>")
    parts.extend(f"<th>{head}</th>" for head in heads)
    parts.append("</tr></thead><tbody>")

    for rows in result.grouped_valid_rows().values():
        for row in rows:
            row_class = "long-sleeve" if row.sleeve == "LONG" else ""
            parts.append(f'<tr class="{row_class}">')
            if options.show_index:
                parts.append(f"<td>{serial}</td>")
                serial += 1
            parts.extend(f"<td>{_cell_value(row, head)}</td>" for head in heads)
            parts.append("</tr>")

    width = max(len(heads) + (1 if options.show_index else 0), 1)
    for row in result.invalid_rows:
        if row.reason == ReasonCode.STRUCTURE:
            parts.append(f'<tr class="error-row"><td colspan="{width}">Invalid Structure</td></tr>')
            continue
        parts.append(f'<tr class="warn-row" data-reason="{row.reason}" title="Invalid {row.reason}">')
        if options.show_index:
            parts.append(f"<td>{serial}</td>")
            serial += 1
        for head in heads:
            value = _cell_value(row, head, format_size=row.reason != ReasonCode.SIZE)
            cell_class = "invalid-cell" if head == row.reason else ""
            parts.append(f'<td class="{cell_class}">{value}</td>')
        parts.append("</tr>")

    parts.append("</tbody></table>")
    return "".join(parts)


def _image(options: DisplayOptions, css_class: str) -> str:
    if not options.image_src:
        return ""
    return f'<div class="{css_class}"><img src="{escape(options.image_src)}" alt="Design" /></div>'


def render_stacked(result: PipelineResult, options: DisplayOptions) -> str:
    return (
        '<div class="top-info-grid">'
        + _image(options, "image-side")
        + f'<div class="info-grid">{render_info_items(result, options)}</div>'
        + f'<div class="summary-side">{render_summary_table(result)}</div>'
        + "</div>"
        + render_detail_table(result, options)
    )


def render_split(result: PipelineResult, options: DisplayOptions) -> str:
    return (
        '<div class="split-layout"><div class="left-column">'
        + _image(options, "image-container")
        + f'<div class="info-block">{render_info_items(result, options, suffix=":")}</div>'
        + render_summary_table(result)
        + '</div><div class="right-column">'
        + render_detail_table(result, options)
        + "</div></div>"
    )


def render_html(result: PipelineResult, options: DisplayOptions) -> str:
    if options.layout == "split":
        return render_split(result, options)
    return render_stacked(result, options)


class HTMLRenderer:
    """IRenderer producing the printable order sheet."""

    media_type = "text/html"

    def render(self, result: PipelineResult, options: DisplayOptions) -> str:
        return render_html(result, options)
