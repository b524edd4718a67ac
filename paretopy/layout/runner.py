"""Layout runner: evaluate, select, render and report."""

from __future__ import annotations

from paretopy.diagnostics import (
    LAYOUT_LINE_OVERFLOW,
    LAYOUT_WIDTH_UNSATISFIABLE,
    Diagnostic,
    collect_diagnostics,
)
from paretopy.doc import Doc
from paretopy.frontier import Candidate
from paretopy.layout.composer import measure_doc
from paretopy.layout.options import LayoutOptions
from paretopy.layout.render import render_lines
from paretopy.layout.results import LayoutRunResult
from paretopy.layout.trace import TraceHook
from paretopy.text import TextRange, line_ranges


def select_best(frontier: list[Candidate], width: int) -> Candidate:
    """Fewest breaks, then narrowest, then narrowest last line.

    Overflow past `width` is compared first; it only matters when no candidate
    fits, because pruning keeps fitting candidates alone whenever there are any.
    """
    if not frontier:
        raise ValueError("Cannot select from an empty frontier")
    return min(
        frontier,
        key=lambda c: (
            max(0, c.measure.max_width - width),
            c.measure.height,
            c.measure.max_width,
            c.measure.last_width,
        ),
    )


def run_layout(
    doc: Doc,
    options: LayoutOptions | None = None,
    *,
    width: int | None = None,
    trace: TraceHook | None = None,
) -> LayoutRunResult:
    """Lay out `doc` and render the best candidate."""
    resolved = _resolve_options(options, width=width)
    frontier = measure_doc(
        doc,
        resolved.width,
        trace,
        memoize=resolved.memoize,
        distinct=resolved.distinct_measures,
    )
    best = select_best(frontier, resolved.width)
    lines = render_lines(doc, best.choices)

    return LayoutRunResult(
        doc=doc,
        options=resolved,
        frontier=frontier,
        best=best,
        lines=lines,
        diagnostics=_overflow_diagnostics(lines, resolved),
    )


def best_layout(doc: Doc, width: int) -> str:
    """Rendered text of the best layout of `doc` at `width`."""
    return run_layout(doc, width=width).text


def _resolve_options(options: LayoutOptions | None, *, width: int | None) -> LayoutOptions:
    if options is not None:
        if width is not None:
            raise ValueError("Pass either options or width, not both")
        return options
    if width is not None:
        return LayoutOptions(width=width)
    return LayoutOptions()


def _overflow_diagnostics(lines: list[str], options: LayoutOptions) -> list[Diagnostic]:
    width = options.width
    ranges = line_ranges(lines)
    overflowing = [
        (number, line, span)
        for number, (line, span) in enumerate(zip(lines, ranges), start=1)
        if len(line) > width
    ]
    if not overflowing:
        return []

    per_line = [
        Diagnostic.from_spec(
            LAYOUT_LINE_OVERFLOW,
            TextRange(span.start.value + max(width, 0), span.end.value),
            detail=f"Line {number} is {len(line)} columns wide.",
            severity=options.overflow_severity,
            line=number,
        )
        for number, line, span in overflowing
    ]
    summary = Diagnostic.from_spec(
        LAYOUT_WIDTH_UNSATISFIABLE,
        TextRange.up_to(ranges[-1].end),
        detail=f"Best layout is {max(len(line) for line in lines)} columns wide, page width is {width}.",
        severity=options.overflow_severity,
    )
    return collect_diagnostics(per_line, [summary])
