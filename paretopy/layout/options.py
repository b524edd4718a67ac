"""Layout modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from paretopy.diagnostics import Severity


class LayoutMode(StrEnum):
    """How overflowing output is reported."""

    BEST_EFFORT = "best-effort"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class LayoutOptions:
    """Page width and evaluation switches for one layout run."""

    width: int = 80
    mode: LayoutMode = LayoutMode.BEST_EFFORT
    memoize: bool = True
    distinct_measures: bool = True
    overflow_severity: Severity = "warning"

    @staticmethod
    def for_mode(mode: LayoutMode, width: int = 80) -> "LayoutOptions":
        if mode == LayoutMode.STRICT:
            return LayoutOptions(
                width=width,
                mode=mode,
                memoize=True,
                distinct_measures=True,
                overflow_severity="error",
            )

        return LayoutOptions(
            width=width,
            mode=mode,
            memoize=True,
            distinct_measures=True,
            overflow_severity="warning",
        )
