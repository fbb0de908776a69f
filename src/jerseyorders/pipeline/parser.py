"""Split order text into lines and lines into positional records."""

from __future__ import annotations

import re
from typing import Iterator, Optional

from jerseyorders.models.order import ORDER_FIELDS, RawRecord
from jerseyorders.pipeline.sizes import normalize_size

DELIMITER = re.compile(r"\s*---\s*")


def _clean(value: str) -> str:
    return value.strip().upper()


def parse_line(line: str) -> RawRecord:
    """Parse ``size --- name --- number --- sleeve --- rib --- pant``.

    Segments beyond the sixth are ignored; missing ones stay ``None``.
    """
    parts = DELIMITER.split(line)
    values: dict[str, Optional[str]] = {}
    for pos, field in enumerate(ORDER_FIELDS):
        if pos >= len(parts):
            values[field] = None
        elif field == "size":
            values[field] = normalize_size(parts[pos])
        else:
            values[field] = _clean(parts[pos])
    return RawRecord(**values)


def iter_order_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every non-blank line."""
    for number, line in enumerate(text.split("\n"), start=1):
        if line.strip():
            yield number, line
