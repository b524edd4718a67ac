#!/usr/bin/env python3
"""Quick perf benchmark for frontier layout."""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time

from tqdm import tqdm

from paretopy.doc import Doc, doc_stats, random_doc
from paretopy.layout import LayoutOptions, frontier_tree, run_layout


def _build_docs(count: int, size: int, seed: int) -> list[Doc]:
    return [random_doc(seed + index, size) for index in range(count)]


def _run_once(
    docs: list[Doc],
    options: LayoutOptions,
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_lines = 0
    total_overflows = 0
    iterator = (
        tqdm(docs, desc=label, unit="doc")
        if show_progress
        else docs
    )
    for doc in iterator:
        result = run_layout(doc, options)
        total_lines += len(result.lines)
        total_overflows += len(result.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_lines, total_overflows


def _largest_frontier(docs: list[Doc], width: int) -> int:
    largest = 0
    for doc in docs:
        for node in frontier_tree(doc, width).walk():
            largest = max(largest, len(node.frontier))
    return largest


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark frontier layout throughput")
    parser.add_argument("--docs", type=int, default=20, help="Number of random documents")
    parser.add_argument("--size", type=int, default=200, help="Leaves per random document")
    parser.add_argument("--width", type=int, default=80, help="Page width")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first document")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-memoize",
        action="store_true",
        help="Evaluate shared subtrees once per reference",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    if args.docs <= 0 or args.size <= 0:
        raise SystemExit("--docs and --size must be positive")

    docs = _build_docs(args.docs, args.size, args.seed)
    options = LayoutOptions(width=args.width, memoize=not args.no_memoize)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                docs,
                options,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        lines_count = 0
        overflow_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, lines_count, overflow_count = _run_once(
                docs,
                options,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, lines_count, overflow_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, lines_count, overflow_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, lines_count, overflow_count = _benchmark()

    best = min(timings)
    worst = max(timings)
    mean = statistics.mean(timings)
    median = statistics.median(timings)
    choices = sum(doc_stats(doc).choices for doc in docs)

    print(f"Documents: {len(docs)} (size={args.size}, seed={args.seed})")
    print(f"Width: {args.width} (memoize={options.memoize})")
    print(f"Distinct choices: {choices}")
    print(f"Rendered lines: {lines_count}")
    print(f"Overflow diagnostics: {overflow_count}")
    print(f"Largest frontier: {_largest_frontier(docs, args.width)}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {best:.4f}s")
    print(f"Median: {median:.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {worst:.4f}s")
    print(f"Docs/s (mean): {len(docs) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
