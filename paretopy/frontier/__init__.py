"""Candidates, dominance and frontier pruning."""

from paretopy.frontier.candidate import Candidate
from paretopy.frontier.pareto import dominates, fits, frontier_filter, pareto

__all__ = [
    "Candidate",
    "dominates",
    "fits",
    "frontier_filter",
    "pareto",
]
