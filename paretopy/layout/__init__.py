"""Frontier composition, rendering and the layout runner."""

from paretopy.layout.composer import FrontierComposer, frontier_tree, measure_doc
from paretopy.layout.options import LayoutMode, LayoutOptions
from paretopy.layout.render import render, render_lines
from paretopy.layout.results import LayoutRunResult
from paretopy.layout.runner import best_layout, run_layout, select_best
from paretopy.layout.trace import FrontierNode, LayoutStep, TraceHook

__all__ = [
    "FrontierComposer",
    "FrontierNode",
    "LayoutMode",
    "LayoutOptions",
    "LayoutRunResult",
    "LayoutStep",
    "TraceHook",
    "best_layout",
    "frontier_tree",
    "measure_doc",
    "render",
    "render_lines",
    "run_layout",
    "select_best",
]
