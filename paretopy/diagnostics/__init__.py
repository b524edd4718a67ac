"""Diagnostics."""

from paretopy.diagnostics.codes import (
    LAYOUT_LINE_OVERFLOW,
    LAYOUT_WIDTH_UNSATISFIABLE,
    DiagnosticSpec,
    Severity,
)
from paretopy.diagnostics.diagnostic import Diagnostic
from paretopy.diagnostics.report import collect_diagnostics, format_diagnostics, has_errors

__all__ = [
    "LAYOUT_LINE_OVERFLOW",
    "LAYOUT_WIDTH_UNSATISFIABLE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_diagnostics",
    "has_errors",
]
