"""Order line models: the raw positional record and the processed row."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, model_validator

ORDER_FIELDS: tuple[str, ...] = ("size", "name", "number", "sleeve", "rib", "pant")


class ReasonCode(StrEnum):
    """First check a rejected line failed."""

    STRUCTURE = "STRUCTURE"
    SIZE = "SIZE"
    SLEEVE = "SLEEVE"
    RIB = "RIB"
    PANT = "PANT"


class RawRecord(BaseModel):
    """Six positional fields split from one input line.

    ``None`` marks a field whose segment was missing from the line (ABSENT);
    ``""`` marks a segment that was present but empty.
    """

    size: Optional[str] = None
    name: Optional[str] = None
    number: Optional[str] = None
    sleeve: Optional[str] = None
    rib: Optional[str] = None
    pant: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def absent_fields(self) -> list[str]:
        return [f for f in ORDER_FIELDS if getattr(self, f) is None]


class ValidationResult(BaseModel):
    valid: bool
    reason: Optional[ReasonCode] = None

    model_config = {"frozen": True}


class OrderRow(BaseModel):
    """Single processed order line, valid or rejected."""

    size: str = ""
    name: str = ""
    number: str = ""
    sleeve: str = ""
    rib: str = ""
    pant: str = ""
    valid: bool
    reason: Optional[ReasonCode] = None
    line_number: int = 0  # 1-based position in the submitted text

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _reason_matches_validity(self) -> OrderRow:
        if self.valid and self.reason is not None:
            raise ValueError("valid rows carry no reason")
        if not self.valid and self.reason is None:
            raise ValueError("invalid rows must carry a reason")
        return self

    @classmethod
    def from_record(
        cls, record: RawRecord, verdict: ValidationResult, line_number: int = 0
    ) -> OrderRow:
        """Build a row from a parsed record; ABSENT fields become empty strings."""
        fields = {f: getattr(record, f) or "" for f in ORDER_FIELDS}
        return cls(**fields, valid=verdict.valid, reason=verdict.reason, line_number=line_number)

    def value(self, field: str) -> str:
        """Field value by upper-case column name (``NAME``, ``SLEEVE``, ...)."""
        return getattr(self, field.lower())
