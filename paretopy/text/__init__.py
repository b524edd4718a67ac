"""Offsets and ranges into rendered layouts."""

from paretopy.text.text import ZERO, TextRange, TextSize, line_ranges, slice_text_range

__all__ = [
    "ZERO",
    "TextRange",
    "TextSize",
    "line_ranges",
    "slice_text_range",
]
