"""Aggregate models: per-size tallies and the descriptive analysis."""

from __future__ import annotations

from pydantic import BaseModel


class SizeTally(BaseModel):
    """Piece counts for one canonical size."""

    total: int = 0
    long: int = 0
    short: int = 0
    rib: int = 0
    pant: int = 0

    model_config = {"frozen": True}

    def __add__(self, other: SizeTally) -> SizeTally:
        return SizeTally(
            total=self.total + other.total,
            long=self.long + other.long,
            short=self.short + other.short,
            rib=self.rib + other.rib,
            pant=self.pant + other.pant,
        )


class PresenceFlags(BaseModel):
    """Whether any valid row carries a non-empty value for each field."""

    name: bool = False
    number: bool = False
    size: bool = False
    sleeve: bool = False
    rib: bool = False
    pant: bool = False

    model_config = {"frozen": True}

    def has(self, field: str) -> bool:
        return getattr(self, field.lower())


class AnalysisSummary(BaseModel):
    """Read-only view over the valid rows and their tallies."""

    has_items: PresenceFlags = PresenceFlags()
    sleeve_info: str = "None"
    rib_info: str = "None"
    pant_info: str = "None"

    # Summary table column switches: some tally has a non-zero count.
    has_long_in_summary: bool = False
    has_short_in_summary: bool = False
    has_rib_in_summary: bool = False
    has_pant_in_summary: bool = False

    model_config = {"frozen": True}
