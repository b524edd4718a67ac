import importlib.util
import sys
from pathlib import Path

import pytest

from paretopy.doc import doc_stats, random_doc

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "time_layout.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("time_layout", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_benchmark_reports_distinct_choice_count(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    script = _load_script()
    argv = ["time_layout.py", "--docs", "2", "--size", "15", "--runs", "1", "--warmups", "0", "--no-progress"]
    monkeypatch.setattr(sys, "argv", argv)

    assert script.main() == 0

    out = capsys.readouterr().out
    expected = sum(doc_stats(random_doc(seed, 15)).choices for seed in (0, 1))
    assert f"Distinct choices: {expected}" in out
    assert "Choice references" not in out
    assert "Documents: 2 (size=15, seed=0)" in out
