"""Bottom-up frontier composition over a doc tree."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from itertools import count

from paretopy.doc import Choice, Concat, Doc, Flush, Text, children, doc_label
from paretopy.frontier import Candidate, pareto
from paretopy.layout.trace import FrontierNode, LayoutStep, TraceHook
from paretopy.measure import ZERO_MEASURE, measure_text

type NodeHook = Callable[[Doc, list[Candidate], list[Candidate]], None]


class _Op(Enum):
    VISIT = auto()
    FLUSH = auto()
    CONCAT_NEXT = auto()
    CONCAT_JOIN = auto()
    CHOICE = auto()


@dataclass(frozen=True, slots=True)
class _Task:
    op: _Op
    doc: Doc
    parts: tuple[Doc, ...] = ()
    index: int = 0
    before: list[Candidate] | None = None


class FrontierComposer:
    """Computes the frontier of every node of one document at one width.

    Evaluation runs on an explicit task stack, so document depth is not
    limited by the interpreter recursion limit. With `memoize`, a subtree
    shared by several parents is evaluated once per `run`; the memo is keyed
    by node identity and is dropped when the run ends. With
    `distinct`, only the first of several candidates with equal measures is
    kept; the root selection is a stable sort, so the chosen layout is the
    same either way.
    """

    def __init__(
        self,
        width: int,
        *,
        trace: TraceHook | None = None,
        memoize: bool = True,
        distinct: bool = True,
        on_node: NodeHook | None = None,
    ) -> None:
        self._width = width
        self._distinct = distinct
        self._trace = trace
        self._memoize = memoize
        self._on_node = on_node
        self._memo: dict[int, list[Candidate]] = {}

    def run(self, doc: Doc) -> list[Candidate]:
        self._memo = {}
        try:
            return self._evaluate(doc)
        finally:
            self._memo = {}

    def _evaluate(self, doc: Doc) -> list[Candidate]:
        values: list[list[Candidate]] = []
        tasks: list[_Task] = [_Task(_Op.VISIT, doc)]

        while tasks:
            task = tasks.pop()
            d = task.doc

            match task.op:
                case _Op.VISIT:
                    self._visit(d, tasks, values)

                case _Op.FLUSH:
                    before = [c.flushed() for c in values.pop()]
                    after = self._prune(before)
                    self._step("flush", d, before, after)
                    self._finish(d, before, after, values)

                case _Op.CONCAT_NEXT:
                    if task.index == len(task.parts):
                        after = values.pop()
                        before = task.before if task.before is not None else after
                        self._finish(d, before, after, values)
                    else:
                        tasks.append(_Task(_Op.CONCAT_JOIN, d, task.parts, task.index))
                        tasks.append(_Task(_Op.VISIT, task.parts[task.index]))

                case _Op.CONCAT_JOIN:
                    right = values.pop()
                    left = values.pop()
                    combined = [lhs.then(rhs) for lhs in left for rhs in right]
                    pruned = self._prune(combined)
                    last = len(task.parts) - 1
                    prefix = d if task.index == last else Concat(task.parts[: task.index + 1])
                    self._step(f"concat step {task.index}/{last}", prefix, combined, pruned)
                    values.append(pruned)
                    tasks.append(
                        _Task(_Op.CONCAT_NEXT, d, task.parts, task.index + 1, before=combined)
                    )

                case _Op.CHOICE:
                    picked_b = [c.picked(False) for c in values.pop()]
                    picked_a = [c.picked(True) for c in values.pop()]
                    before = picked_a + picked_b
                    after = self._prune(before)
                    self._step("choice (<|>)", d, before, after)
                    self._finish(d, before, after, values)

        return values.pop()

    def _visit(self, d: Doc, tasks: list[_Task], values: list[list[Candidate]]) -> None:
        if self._memoize:
            cached = self._memo.get(id(d))
            if cached is not None:
                values.append(cached)
                return

        match d:
            case Text(s=s):
                frontier = [Candidate(measure_text(s))]
                self._step(doc_label(d), d, frontier, frontier)
                self._finish(d, frontier, frontier, values)

            case Flush(doc=inner):
                tasks.append(_Task(_Op.FLUSH, d))
                tasks.append(_Task(_Op.VISIT, inner))

            case Concat(docs=()):
                frontier = [Candidate(ZERO_MEASURE)]
                self._finish(d, frontier, frontier, values)

            case Concat(docs=parts):
                tasks.append(_Task(_Op.CONCAT_NEXT, d, parts, 1))
                tasks.append(_Task(_Op.VISIT, parts[0]))

            case Choice(a=a, b=b):
                # a is evaluated before b
                tasks.append(_Task(_Op.CHOICE, d))
                tasks.append(_Task(_Op.VISIT, b))
                tasks.append(_Task(_Op.VISIT, a))

    def _prune(self, candidates: list[Candidate]) -> list[Candidate]:
        return pareto(candidates, self._width, distinct=self._distinct)

    def _step(
        self,
        label: str,
        d: Doc,
        before: list[Candidate],
        after: list[Candidate],
    ) -> None:
        if self._trace is not None:
            self._trace(
                LayoutStep(
                    label=label,
                    doc=d,
                    candidates_before=list(before),
                    candidates_after=list(after),
                )
            )

    def _finish(
        self,
        d: Doc,
        before: list[Candidate],
        after: list[Candidate],
        values: list[list[Candidate]],
    ) -> None:
        if self._memoize:
            self._memo[id(d)] = after
        if self._on_node is not None:
            self._on_node(d, list(before), list(after))
        values.append(after)


def measure_doc(
    doc: Doc,
    width: int,
    trace: TraceHook | None = None,
    *,
    memoize: bool = True,
    distinct: bool = True,
) -> list[Candidate]:
    """Frontier of all layouts of `doc` at page width `width`."""
    return FrontierComposer(width, trace=trace, memoize=memoize, distinct=distinct).run(doc)


def frontier_tree(
    doc: Doc,
    width: int,
    *,
    memoize: bool = True,
    distinct: bool = True,
) -> FrontierNode:
    """Evaluate `doc` and return the frontier of every node, shaped like the doc tree."""
    nodes: dict[int, FrontierNode] = {}
    order = count()

    def on_node(d: Doc, before: list[Candidate], after: list[Candidate]) -> None:
        nodes[id(d)] = FrontierNode(
            label=doc_label(d),
            doc=d,
            children=tuple(nodes[id(child)] for child in children(d)),
            compute_order=next(order),
            candidates_before=before,
            frontier=after,
        )

    FrontierComposer(width, memoize=memoize, distinct=distinct, on_node=on_node).run(doc)
    return nodes[id(doc)]
