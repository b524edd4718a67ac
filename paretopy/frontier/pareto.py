"""Dominance and Pareto-frontier pruning."""

from __future__ import annotations

from collections.abc import Iterable

from paretopy.frontier.candidate import Candidate
from paretopy.measure import Measure


def dominates(a: Measure, b: Measure) -> bool:
    """True if `a` is no worse than `b` everywhere and strictly better somewhere."""
    return (
        a.height <= b.height
        and a.max_width <= b.max_width
        and a.last_width <= b.last_width
        and (a.height < b.height or a.max_width < b.max_width or a.last_width < b.last_width)
    )


def fits(measure: Measure, width: int) -> bool:
    return measure.max_width <= width


def frontier_filter(candidates: Iterable[Candidate], *, distinct: bool = False) -> list[Candidate]:
    """Minimal elements under dominance, survivors kept in arrival order.

    Candidates with equal measures never dominate each other, so all of them
    survive unless `distinct` is set, in which case only the first one does.
    """
    result: list[Candidate] = []
    for c in candidates:
        if any(dominates(r.measure, c.measure) for r in result):
            continue
        if distinct and any(r.measure == c.measure for r in result):
            continue
        result = [r for r in result if not dominates(c.measure, r.measure)]
        result.append(c)
    return result


def pareto(candidates: Iterable[Candidate], width: int, *, distinct: bool = False) -> list[Candidate]:
    """Frontier of the candidates that fit `width`.

    If none fit, the frontier of all candidates is kept instead, so a
    non-empty input always gives a non-empty frontier.
    """
    pool = list(candidates)
    fitting = [c for c in pool if fits(c.measure, width)]
    return frontier_filter(fitting if fitting else pool, distinct=distinct)
