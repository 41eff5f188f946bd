"""Small string helpers for fixed-width price columns."""

from __future__ import annotations


def pad_left(text: str, width: int, fill: str) -> str:
    """Left-pad *text* with *fill* until it is *width* characters long."""
    if len(text) >= width:
        return text
    return fill * (width - len(text)) + text


def multiply(text: str, count: int) -> str:
    """Return *text* repeated *count* times (empty for non-positive counts)."""
    return text * max(0, count)
