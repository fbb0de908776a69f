"""Format a jersey order list from the command line.

Usage:
    python scripts/format_orders.py orders.txt --format text --party-name "Dhaka XI"
    cat orders.txt | python scripts/format_orders.py - --format json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from jerseyorders.core.config import AppSettings
from jerseyorders.core.exceptions import NoOrderDataError, NoValidRowsError
from jerseyorders.core.log import configure_logging
from jerseyorders.models.options import DisplayOptions
from jerseyorders.pipeline.runner import run
from jerseyorders.renderers import OutputFormat, render


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tally and format a jersey order list")
    parser.add_argument("source", help="Order text file, or - for stdin")
    parser.add_argument("--format", dest="fmt", default=OutputFormat.TEXT.value,
                        choices=[f.value for f in OutputFormat], help="Output format")
    parser.add_argument("--party-name", default="", help="Party (client) name")
    parser.add_argument("--jersey-type", default=None, help="Jersey type, e.g. POLO")
    parser.add_argument("--fabrics-type", default=None, help="Fabric type, e.g. PP")
    parser.add_argument("--show-index", action="store_true", default=None,
                        help="Add a serial-number column to the detail table")
    parser.add_argument("--layout", choices=["stacked", "split"], default=None,
                        help="HTML layout")
    parser.add_argument("--image-src", default=None, help="Design image URL or data URI")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    configure_logging(settings.log_level)

    result = run(read_input(args.source))
    error: Exception | None = None
    if result.is_empty:
        error = NoOrderDataError()
    elif args.fmt == OutputFormat.JSON and not result.valid_count:
        error = NoValidRowsError(result.invalid_count)
    if error is not None:
        print(f"error: {error}", file=sys.stderr)
        return 1

    options = DisplayOptions.from_settings(
        settings,
        party_name=args.party_name,
        jersey_type=args.jersey_type,
        fabrics_type=args.fabrics_type,
        show_index=args.show_index,
        layout=args.layout,
        image_src=args.image_src,
    )
    print(render(result, args.fmt, options))
    return 0


if __name__ == "__main__":
    sys.exit(main())
