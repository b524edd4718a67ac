"""Measure algebra."""

from paretopy.measure.measure import (
    ZERO_MEASURE,
    Measure,
    concat_all,
    concat_measures,
    flush_measure,
    measure_lines,
    measure_text,
)

__all__ = [
    "ZERO_MEASURE",
    "Measure",
    "concat_all",
    "concat_measures",
    "flush_measure",
    "measure_lines",
    "measure_text",
]
