"""Plain-text padding helpers.

Widths are measured in characters, not terminal cells. Full-width glyphs in
the art therefore count as one column each.
"""

from __future__ import annotations


def pad_center(text: str, width: int) -> str:
    """Center text in width columns, extra space going to the right.

    Text already at least width characters long is returned unchanged.
    """
    diff = width - len(text)
    if diff <= 0:
        return text
    left = diff // 2
    return " " * left + text + " " * (diff - left)


def pad_left(text: str, width: int) -> str:
    """Left-align text in width columns by appending spaces."""
    diff = width - len(text)
    if diff <= 0:
        return text
    return text + " " * diff


__all__ = ["pad_center", "pad_left"]
