import pytest

from paretopy.doc import example_doc, random_doc, text, vcat
from paretopy.frontier import Candidate
from paretopy.layout import (
    LayoutMode,
    LayoutOptions,
    LayoutStep,
    best_layout,
    measure_doc,
    run_layout,
    select_best,
)
from paretopy.measure import Measure
from paretopy.text import slice_text_range
from tests._debug import debug_print_layout
from tests._shared_cases import LAYOUT_CASES, LayoutCase, case_id, nested_group


@pytest.mark.parametrize("case", LAYOUT_CASES, ids=case_id)
def test_best_layout_cases(case: LayoutCase) -> None:
    rendered = best_layout(case.build(), case.width)
    debug_print_layout(case.name, case.width, rendered)

    assert rendered == case.expected


def test_select_best_orders_by_height_then_widths() -> None:
    frontier = [
        Candidate(Measure(1, 3, 3), (True,)),
        Candidate(Measure(0, 5, 5), (False,)),
        Candidate(Measure(0, 5, 4), (False, True)),
    ]

    assert select_best(frontier, 10) == frontier[2]


def test_select_best_prefers_least_overflow_when_nothing_fits() -> None:
    frontier = [
        Candidate(Measure(0, 4, 4), (True,)),
        Candidate(Measure(1, 2, 2), (False,)),
    ]

    assert select_best(frontier, 1) == frontier[1]


def test_select_best_keeps_first_of_equal_measures() -> None:
    first = Candidate(Measure(1, 3, 3), (True, False))
    second = Candidate(Measure(1, 3, 3), (False, True))

    assert select_best([first, second], 3) is first


def test_select_best_rejects_empty_frontier() -> None:
    with pytest.raises(ValueError, match="empty frontier"):
        select_best([], 10)


def test_run_layout_returns_frontier_and_rendering() -> None:
    result = run_layout(nested_group(), width=40)

    assert result.text == "a b c"
    assert result.lines == ["a b c"]
    assert result.best == Candidate(Measure(0, 5, 5), (True, True))
    assert result.frontier == measure_doc(nested_group(), 40)
    assert result.options == LayoutOptions(width=40)
    assert result.fits is True
    assert result.diagnostics == []
    assert result.has_errors is False


def test_run_layout_accepts_options() -> None:
    options = LayoutOptions(width=2, memoize=False, distinct_measures=False)

    result = run_layout(nested_group(), options)

    assert result.options is options
    assert result.text == "a\nb\nc"


def test_run_layout_defaults_to_eighty_columns() -> None:
    result = run_layout(example_doc())

    assert result.options.width == 80
    # one break, inside ul, beats stacking the arguments of div
    assert result.lines == [
        'render(div(h1("Hello"), p("This is a pretty printer demo"), ul(li("item 1"),',
        " " * 63 + 'li("item 2"))))',
    ]
    assert [len(line) for line in result.lines] == [76, 78]
    assert result.best == Candidate(Measure(1, 78, 78), (True, False))
    assert result.fits is True


def test_run_layout_rejects_options_and_width_together() -> None:
    with pytest.raises(ValueError, match="Pass either options or width, not both"):
        run_layout(text("a"), LayoutOptions(width=10), width=10)


def test_run_layout_forwards_trace_hook() -> None:
    steps: list[LayoutStep] = []

    run_layout(nested_group(), width=40, trace=steps.append)

    assert steps[-1].label == "choice (<|>)"


def test_overflow_is_reported_as_warnings_in_best_effort_mode() -> None:
    result = run_layout(text("abcdefgh"), width=5)

    assert result.text == "abcdefgh"
    assert result.fits is False
    assert result.has_errors is False
    assert [d.code for d in result.diagnostics] == ["LAYOUT_WIDTH_UNSATISFIABLE", "LAYOUT_LINE_OVERFLOW"]
    assert all(d.severity == "warning" for d in result.diagnostics)
    assert all(d.category == "layout" for d in result.diagnostics)


def test_overflow_is_an_error_in_strict_mode() -> None:
    result = run_layout(text("abcdefgh"), LayoutOptions.for_mode(LayoutMode.STRICT, width=5))

    assert result.has_errors is True
    assert all(d.severity == "error" for d in result.diagnostics)


def test_overflow_diagnostics_point_at_overflowing_text() -> None:
    result = run_layout(vcat([text("ok"), text("too long"), text("fine")]), width=4)

    summary, line_overflow = result.diagnostics
    assert summary.range.as_tuple() == (0, len(result.text))
    assert "8 columns" in summary.message
    assert "Line 2" in line_overflow.message
    assert slice_text_range(result.text, line_overflow.range) == "long"
    assert summary.line is None
    assert line_overflow.line == 2


def test_run_result_report_lists_overflowing_lines() -> None:
    result = run_layout(vcat([text("ok"), text("too long"), text("fine")]), width=4)

    report = result.report()

    assert report.startswith("warning[LAYOUT_WIDTH_UNSATISFIABLE]: ")
    assert "warning[LAYOUT_LINE_OVERFLOW] line 2: " in report
    assert "  | long  (4 columns over)" in report
    assert run_layout(text("ok"), width=4).report() == ""


def test_for_mode_presets() -> None:
    assert LayoutOptions.for_mode(LayoutMode.BEST_EFFORT) == LayoutOptions()
    strict = LayoutOptions.for_mode(LayoutMode.STRICT, width=60)
    assert strict.width == 60
    assert strict.mode == LayoutMode.STRICT
    assert strict.overflow_severity == "error"


def test_best_layout_respects_width_when_something_fits() -> None:
    for seed in range(20):
        doc = random_doc(seed, 40)
        for width in (12, 24, 48):
            result = run_layout(doc, width=width)
            if result.fits:
                assert all(len(line) <= width for line in result.lines)
                assert result.diagnostics == []
            else:
                assert result.diagnostics
