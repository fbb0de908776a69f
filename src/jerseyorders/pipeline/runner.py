"""Pipeline entry point: order text in, immutable result out."""

from __future__ import annotations

import logging

from jerseyorders.models.order import OrderRow
from jerseyorders.models.result import PipelineResult
from jerseyorders.pipeline.aggregator import aggregate
from jerseyorders.pipeline.parser import iter_order_lines, parse_line
from jerseyorders.pipeline.validator import validate_record

logger = logging.getLogger(__name__)


def process_line(line: str, line_number: int = 0) -> OrderRow:
    """Parse and validate a single order line."""
    record = parse_line(line)
    verdict = validate_record(record)
    if not verdict.valid:
        logger.debug("Line %d rejected (%s): %r", line_number, verdict.reason, line)
    return OrderRow.from_record(record, verdict, line_number=line_number)


def run(text: str) -> PipelineResult:
    """Parse, validate and aggregate ``text``.

    Malformed lines become invalid rows; this never raises for bad input.
    """
    rows = tuple(process_line(line, number) for number, line in iter_order_lines(text))
    tallies, summary, invalid_count = aggregate(rows)
    logger.info(
        "Processed %d order lines: %d valid, %d invalid",
        len(rows), len(rows) - invalid_count, invalid_count,
    )
    return PipelineResult(
        rows=rows, tallies=tallies, summary=summary, invalid_count=invalid_count,
    )
