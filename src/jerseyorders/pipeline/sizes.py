"""Size vocabulary, normalization and canonical ordering."""

from __future__ import annotations

from typing import Iterable

# Adult letter sizes, then even kids sizes.
SIZE_ORDER: tuple[str, ...] = (
    "XS", "S", "M", "L", "XL", "2XL", "3XL", "4XL", "5XL",
    "2", "4", "6", "8", "10", "12", "14", "16",
)

SIZE_ALIASES = {
    "XXL": "2XL",
    "XXXL": "3XL",
    "XXXXL": "4XL",
    "XXXXXL": "5XL",
}

_SIZE_POSITION = {size: i for i, size in enumerate(SIZE_ORDER)}


def normalize_size(size: str = "") -> str:
    """Canonicalize a raw size token.

    Unknown tokens come back upper-cased and trimmed; validation rejects them.
    Kids sizes are only sold in even numbers, so odd ones round up.
    """
    token = (size or "").strip().upper()
    if token in SIZE_ALIASES:
        return SIZE_ALIASES[token]
    if token.isascii() and token.isdigit():
        num = int(token)
        return str(num if num % 2 == 0 else num + 1)
    return token


def is_canonical_size(size: str) -> bool:
    return size in _SIZE_POSITION


def is_kids_size(size: str) -> bool:
    return bool(size) and size.isascii() and size.isdigit()


def format_size_for_display(size: str) -> str:
    return f"{size} KIDS" if is_kids_size(size) else size


def size_index(size: str) -> int:
    """Vocabulary position; tokens outside the vocabulary sort last."""
    return _SIZE_POSITION.get(size, len(SIZE_ORDER))


def sort_sizes(sizes: Iterable[str]) -> list[str]:
    return sorted(sizes, key=size_index)
