"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass

from paretopy.diagnostics.codes import DiagnosticSpec, Severity
from paretopy.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A layout problem, located by its range in the rendered text.

    `line` is the 1-based rendered line the problem sits on, or None when it
    concerns the whole layout.
    """

    code: str
    message: str
    range: TextRange
    severity: Severity = "warning"
    hint: str | None = None
    category: str | None = None
    line: int | None = None

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        range: TextRange,
        *,
        detail: str | None = None,
        severity: Severity | None = None,
        line: int | None = None,
    ) -> Diagnostic:
        """Build a diagnostic for `spec`, appending `detail` to its message."""
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return cls(
            code=spec.code,
            message=message,
            range=range,
            severity=spec.severity if severity is None else severity,
            hint=spec.hint,
            category=spec.category,
            line=line,
        )
