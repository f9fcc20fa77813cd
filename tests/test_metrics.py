from types import SimpleNamespace

import pytest

from wordcheck import metrics
from wordcheck.metrics import StageTimer


def test_stage_records_timing():
    timer = StageTimer()
    with timer.stage("parse"):
        pass
    assert "parse" in timer.timings
    assert timer.timings["parse"] >= 0
    assert timer.counts["parse"] == 1


def test_repeated_stage_accumulates():
    timer = StageTimer()
    for _ in range(3):
        with timer.stage("check"):
            pass
    assert timer.counts["check"] == 3
    assert list(timer.timings) == ["check"]


def test_stage_recorded_on_error():
    timer = StageTimer()
    with pytest.raises(RuntimeError):
        with timer.stage("check"):
            raise RuntimeError("boom")
    assert timer.counts["check"] == 1


def test_summary_includes_total():
    timer = StageTimer()
    with timer.stage("parse"):
        pass
    summary = timer.summary()
    assert set(summary) == {"parse", "total"}
    assert summary["total"] >= summary["parse"]


def test_repeated_stage_sums_without_rounding_drift(monkeypatch):
    """Many sub-0.05ms stages still add up to a visible total."""
    ticks = iter([0.0, 1.0, 1.00004, 2.0, 2.00004, 3.0, 3.00004, 4.0])
    monkeypatch.setattr(metrics, "time", SimpleNamespace(perf_counter=lambda: next(ticks)))
    timer = StageTimer()
    for _ in range(3):
        with timer.stage("check"):
            pass
    assert timer.timings["check"] == pytest.approx(0.12)
    assert timer.summary()["check"] == 0.1
