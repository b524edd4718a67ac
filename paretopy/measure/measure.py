"""Measure algebra: layout summaries without materialized text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class Measure:
    """Shape of a layout.

    - height: number of line breaks (lines - 1)
    - max_width: width of the widest line
    - last_width: width of the final line, where a following document attaches

    Ordering is lexicographic on (height, max_width, last_width). That is the
    selection order at the root, not dominance.
    """

    height: int
    max_width: int
    last_width: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.height, self.max_width, self.last_width)

    def __repr__(self) -> str:
        return f"Measure({self.height}, {self.max_width}, {self.last_width})"


ZERO_MEASURE: Final[Measure] = Measure(0, 0, 0)


def measure_text(s: str) -> Measure:
    return Measure(0, len(s), len(s))


def flush_measure(m: Measure) -> Measure:
    return Measure(m.height + 1, m.max_width, 0)


def concat_measures(a: Measure, b: Measure) -> Measure:
    # b's first line starts at column a.last_width, so its width is shifted.
    return Measure(
        a.height + b.height,
        max(a.max_width, a.last_width + b.max_width),
        a.last_width + b.last_width,
    )


def concat_all(measures: Iterable[Measure]) -> Measure:
    """Left fold of `concat_measures`; the empty fold is the empty text."""
    result: Measure | None = None
    for m in measures:
        result = m if result is None else concat_measures(result, m)
    return ZERO_MEASURE if result is None else result


def measure_lines(lines: list[str]) -> Measure:
    """Measure of already rendered lines."""
    if not lines:
        return ZERO_MEASURE
    return Measure(len(lines) - 1, max(len(line) for line in lines), len(lines[-1]))
