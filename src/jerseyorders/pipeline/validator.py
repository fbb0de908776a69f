"""Domain checks for a parsed order record."""

from __future__ import annotations

from jerseyorders.models.order import RawRecord, ReasonCode, ValidationResult
from jerseyorders.pipeline.sizes import is_canonical_size

SLEEVE_VALUES = frozenset({"LONG", "SHORT"})
RIB_VALUES = frozenset({"CUFF", "YES", "NO"})
PANT_VALUES = frozenset({"YES", "NO"})


def _allowed(value: str, accepted: frozenset[str]) -> bool:
    return not value or value in accepted


def validate_record(record: RawRecord) -> ValidationResult:
    """Run the checks in fixed order; the first failure decides the reason.

    Name and number are free text and never checked.
    """
    if record.absent_fields:
        return ValidationResult(valid=False, reason=ReasonCode.STRUCTURE)
    if not record.size or not is_canonical_size(record.size):
        return ValidationResult(valid=False, reason=ReasonCode.SIZE)
    if not _allowed(record.sleeve, SLEEVE_VALUES):
        return ValidationResult(valid=False, reason=ReasonCode.SLEEVE)
    if not _allowed(record.rib, RIB_VALUES):
        return ValidationResult(valid=False, reason=ReasonCode.RIB)
    if not _allowed(record.pant, PANT_VALUES):
        return ValidationResult(valid=False, reason=ReasonCode.PANT)
    return ValidationResult(valid=True)
