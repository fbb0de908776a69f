"""Per-size tallies and descriptive labels over a finished row set."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from jerseyorders.models.order import OrderRow
from jerseyorders.models.summary import AnalysisSummary, PresenceFlags, SizeTally
from jerseyorders.pipeline.sizes import sort_sizes

NO = "NO"
RIB_COUNTED = frozenset({"CUFF", "YES"})
PANT_COUNTED = frozenset({"YES"})

# Tokens outside LONG/SHORT are labelled in this order.
_EXTRA_LABEL_ORDER = ("CUFF", "YES")


def tally_sizes(rows: Iterable[OrderRow]) -> dict[str, SizeTally]:
    """Count valid rows per size; keys come back in canonical order."""
    counts: dict[str, Counter[str]] = {}
    for row in rows:
        if not row.valid:
            continue
        count = counts.setdefault(row.size, Counter())
        count["total"] += 1
        if row.sleeve == "LONG":
            count["long"] += 1
        elif row.sleeve == "SHORT":
            count["short"] += 1
        if row.rib in RIB_COUNTED:
            count["rib"] += 1
        if row.pant in PANT_COUNTED:
            count["pant"] += 1
    return {size: SizeTally(**counts[size]) for size in sort_sizes(counts)}


def sum_tallies(tallies: Iterable[SizeTally]) -> SizeTally:
    """Column sums for the summary footer."""
    return sum(tallies, SizeTally())


def describe_variants(values: Iterable[str]) -> str:
    """Label the distinct variants of one field across valid rows.

    Empty values and ``NO`` are not variants. LONG/SHORT map to the sleeve
    wording; any other token (rib ``CUFF``/``YES``, pant ``YES``) is labelled
    by its own title-cased name.
    """
    kinds = {v for v in values if v and v != NO}
    if "LONG" in kinds and "SHORT" in kinds:
        return "Long & Short"
    if "LONG" in kinds:
        return "Long"
    if "SHORT" in kinds:
        return "Short"
    extras = [k for k in _EXTRA_LABEL_ORDER if k in kinds]
    extras += sorted(kinds - set(_EXTRA_LABEL_ORDER) - {"LONG", "SHORT"})
    if extras:
        return " & ".join(k.title() for k in extras)
    return "None"


def analyze(rows: Sequence[OrderRow], tallies: dict[str, SizeTally]) -> AnalysisSummary:
    valid = [r for r in rows if r.valid]
    has_items = PresenceFlags(
        name=any(r.name for r in valid),
        number=any(r.number for r in valid),
        size=any(r.size for r in valid),
        sleeve=any(r.sleeve for r in valid),
        rib=any(r.rib for r in valid),
        pant=any(r.pant for r in valid),
    )
    counts = tallies.values()
    return AnalysisSummary(
        has_items=has_items,
        sleeve_info=describe_variants(r.sleeve for r in valid),
        rib_info=describe_variants(r.rib for r in valid),
        pant_info=describe_variants(r.pant for r in valid),
        has_long_in_summary=any(t.long for t in counts),
        has_short_in_summary=any(t.short for t in counts),
        has_rib_in_summary=any(t.rib for t in counts),
        has_pant_in_summary=any(t.pant for t in counts),
    )


def aggregate(rows: Sequence[OrderRow]) -> tuple[dict[str, SizeTally], AnalysisSummary, int]:
    """Return ``(tallies, summary, invalid_count)`` for a full row set."""
    tallies = tally_sizes(rows)
    invalid_count = sum(1 for r in rows if not r.valid)
    return tallies, analyze(rows, tallies), invalid_count
