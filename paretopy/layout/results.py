"""Layout run result carrier."""

from __future__ import annotations

from dataclasses import dataclass

from paretopy.diagnostics import Diagnostic, format_diagnostics, has_errors
from paretopy.doc import Doc
from paretopy.frontier import Candidate, fits
from paretopy.layout.options import LayoutOptions


@dataclass(frozen=True, slots=True)
class LayoutRunResult:
    """Result of laying out one document at one page width."""

    doc: Doc
    options: LayoutOptions
    frontier: list[Candidate]
    best: Candidate
    lines: list[str]
    diagnostics: list[Diagnostic]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def fits(self) -> bool:
        return fits(self.best.measure, self.options.width)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def report(self) -> str:
        """Plain-text diagnostics report; empty when the layout fits."""
        return format_diagnostics(self.diagnostics, self.text)
