"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from paretopy.diagnostics.diagnostic import Diagnostic
from paretopy.text import slice_text_range


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Concatenate diagnostic groups, whole-layout diagnostics before per-line ones."""
    diagnostics = [d for group in groups for d in group]
    # stable, so emission order is kept within each kind
    diagnostics.sort(key=lambda d: d.line is not None)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostics(diagnostics: Iterable[Diagnostic], text: str) -> str:
    """Plain-text report of `diagnostics` against the rendered `text`.

    Line diagnostics quote the part of the line they cover, e.g.::

        warning[LAYOUT_LINE_OVERFLOW] line 2: Rendered line exceeds ...
          | long  (4 columns over)
          = hint: Break long text runs ...
    """
    out: list[str] = []
    for d in diagnostics:
        where = "" if d.line is None else f" line {d.line}"
        out.append(f"{d.severity}[{d.code}]{where}: {d.message}")
        if d.line is not None and not d.range.is_empty():
            excerpt = slice_text_range(text, d.range)
            out.append(f"  | {excerpt}  ({d.range.len().value} columns over)")
        if d.hint:
            out.append(f"  = hint: {d.hint}")
    return "\n".join(out)
