"""Trace records for tooling that inspects intermediate pruning."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from paretopy.doc import Doc
from paretopy.frontier import Candidate


@dataclass(frozen=True, slots=True)
class LayoutStep:
    """One composer step: a sub-document's candidates before and after pruning."""

    label: str
    doc: Doc
    candidates_before: list[Candidate]
    candidates_after: list[Candidate]


type TraceHook = Callable[[LayoutStep], None]


@dataclass(frozen=True, slots=True)
class FrontierNode:
    """Per-node frontier data, mirroring the shape of the doc tree."""

    label: str
    doc: Doc
    children: tuple[FrontierNode, ...]
    compute_order: int
    candidates_before: list[Candidate]
    frontier: list[Candidate]

    def walk(self) -> list[FrontierNode]:
        """Nodes in pre-order; a node shared by several parents is listed once."""
        out: list[FrontierNode] = []
        seen: set[int] = set()
        stack: list[FrontierNode] = [self]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            out.append(node)
            stack.extend(reversed(node.children))
        return out
