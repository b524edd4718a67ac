"""Optimal document layout by Pareto-frontier composition."""

from paretopy.doc import (
    EMPTY,
    Choice,
    Concat,
    Doc,
    Flush,
    Text,
    call,
    choice,
    concat,
    doc_to_string,
    flush,
    group,
    hang,
    hsep,
    indent,
    text,
    vcat,
)
from paretopy.frontier import Candidate, dominates, frontier_filter, pareto
from paretopy.layout import (
    FrontierNode,
    LayoutMode,
    LayoutOptions,
    LayoutRunResult,
    LayoutStep,
    best_layout,
    frontier_tree,
    measure_doc,
    render,
    run_layout,
    select_best,
)
from paretopy.measure import Measure, concat_measures, flush_measure, measure_text

__all__ = [
    "EMPTY",
    "Candidate",
    "Choice",
    "Concat",
    "Doc",
    "Flush",
    "FrontierNode",
    "LayoutMode",
    "LayoutOptions",
    "LayoutRunResult",
    "LayoutStep",
    "Measure",
    "Text",
    "best_layout",
    "call",
    "choice",
    "concat",
    "concat_measures",
    "doc_to_string",
    "dominates",
    "flush",
    "flush_measure",
    "frontier_filter",
    "frontier_tree",
    "group",
    "hang",
    "hsep",
    "indent",
    "measure_doc",
    "measure_text",
    "pareto",
    "render",
    "run_layout",
    "select_best",
    "text",
    "vcat",
]
