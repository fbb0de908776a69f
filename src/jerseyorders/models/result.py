"""Pipeline output: every row from one run plus its aggregates."""

from __future__ import annotations

from pydantic import BaseModel, Field

from jerseyorders.models.order import OrderRow
from jerseyorders.models.summary import AnalysisSummary, SizeTally


class PipelineResult(BaseModel):
    """Immutable outcome of one ``run(text)`` call."""

    rows: tuple[OrderRow, ...] = ()
    tallies: dict[str, SizeTally] = Field(default_factory=dict)  # canonical size order
    summary: AnalysisSummary = AnalysisSummary()
    invalid_count: int = 0

    model_config = {"frozen": True}

    @property
    def valid_rows(self) -> list[OrderRow]:
        return [r for r in self.rows if r.valid]

    @property
    def invalid_rows(self) -> list[OrderRow]:
        return [r for r in self.rows if not r.valid]

    @property
    def valid_count(self) -> int:
        return len(self.rows) - self.invalid_count

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def grouped_valid_rows(self) -> dict[str, list[OrderRow]]:
        """Valid rows keyed by size, sizes in canonical order, input order within."""
        grouped: dict[str, list[OrderRow]] = {size: [] for size in self.tallies}
        for row in self.valid_rows:
            grouped[row.size].append(row)
        return grouped
