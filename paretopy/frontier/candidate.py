"""Layout candidates: a measure plus the choices that produced it."""

from __future__ import annotations

from dataclasses import dataclass

from paretopy.measure import Measure, concat_measures, flush_measure


@dataclass(frozen=True, slots=True)
class Candidate:
    """One resolved layout of a sub-document.

    `choices` holds one entry per visited Choice node, in render order:
    True picks the first branch, False the second.
    """

    measure: Measure
    choices: tuple[bool, ...] = ()

    def flushed(self) -> Candidate:
        return Candidate(flush_measure(self.measure), self.choices)

    def then(self, other: Candidate) -> Candidate:
        """Tetris-join this layout with `other` placed after it."""
        return Candidate(
            concat_measures(self.measure, other.measure),
            self.choices + other.choices,
        )

    def picked(self, branch: bool) -> Candidate:
        return Candidate(self.measure, (branch, *self.choices))
