"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LAYOUT_WIDTH_UNSATISFIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LAYOUT_WIDTH_UNSATISFIABLE",
    message="No layout of the document fits the page width.",
    hint="Add choices with narrower alternatives or raise the page width.",
    severity="warning",
    category="layout",
)

LAYOUT_LINE_OVERFLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LAYOUT_LINE_OVERFLOW",
    message="Rendered line exceeds the page width.",
    hint="Break long text runs into separate documents joined by a group.",
    severity="warning",
    category="layout",
)
