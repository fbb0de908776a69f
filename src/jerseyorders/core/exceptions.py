"""Jersey order formatter exception hierarchy."""

from __future__ import annotations


class JerseyOrdersError(Exception):
    """Base exception for all formatter errors."""


class NoOrderDataError(JerseyOrdersError):
    """Input text held no order lines."""

    def __init__(self) -> None:
        super().__init__("No data to format")


class NoValidRowsError(JerseyOrdersError):
    """Every parsed line was rejected, nothing to export."""

    def __init__(self, invalid_count: int = 0) -> None:
        self.invalid_count = invalid_count
        super().__init__(f"No valid data ({invalid_count} invalid rows)")


class UnknownFormatError(JerseyOrdersError):
    """No renderer registered for the requested output format."""

    def __init__(self, fmt: str) -> None:
        self.fmt = fmt
        super().__init__(f"Unknown output format: {fmt!r}")


class InputTooLargeError(JerseyOrdersError):
    """Order text exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Order text is {size} chars, limit is {limit}")
