"""Tests for demo discovery and the runner."""

import io
import types

import pytest
from rich.console import Console

from oopdemos.demos import DemoInfo, list_demos, load_demo
from oopdemos.environment import DemoSettings
from oopdemos.models import DemoResult, RunStatus, RunSummary
from oopdemos.runner import _run_kwargs, run_all_demos, run_demo

ALL_DEMOS = ["bank", "coffee", "ecommerce", "family", "game", "library", "shapes", "vehicles"]


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


# --- Discovery ---

def test_list_demos_finds_all_in_name_order():
    assert [d.name for d in list_demos()] == ALL_DEMOS


def test_load_demo_reads_metadata():
    info = load_demo("game")
    assert info is not None
    assert info.module == "oopdemos.demos.game"
    assert "factory" in info.concepts
    assert info.description


def test_load_unknown_demo_returns_none():
    assert load_demo("spaceship") is None


# --- Runner ---

def test_run_kwargs_only_passes_rng_when_accepted():
    settings = DemoSettings(seed=3)
    with_rng = types.SimpleNamespace(run=lambda console, rng=None: None)
    without_rng = types.SimpleNamespace(run=lambda console: None)
    assert "rng" in _run_kwargs(with_rng, settings)
    assert _run_kwargs(without_rng, settings) == {}


@pytest.mark.parametrize("name", ALL_DEMOS)
def test_every_demo_runs_cleanly(console, name):
    result = run_demo(name, console, DemoSettings(seed=1))
    assert result.status == RunStatus.PASSED, result.error
    assert result.wall_clock_s >= 0


def test_unknown_demo_is_a_failed_result(console):
    result = run_demo("spaceship", console)
    assert result.status == RunStatus.FAILED
    assert "Unknown demo" in result.error


def test_failing_demo_is_recorded_not_raised(console, monkeypatch):
    def boom(console):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(DemoInfo, "load_entry", lambda self: types.SimpleNamespace(run=boom))
    result = run_demo("coffee", console)
    assert result.status == RunStatus.FAILED
    assert result.error == "RuntimeError: kaboom"
    assert "FAILED" in console.file.getvalue()


def test_run_all_continues_past_failures(console, monkeypatch):
    real_load_entry = DemoInfo.load_entry

    def load_entry(self):
        if self.name == "family":
            return types.SimpleNamespace(run=lambda console: 1 / 0)
        return real_load_entry(self)

    monkeypatch.setattr(DemoInfo, "load_entry", load_entry)
    summary = run_all_demos(console, DemoSettings(seed=1))
    assert len(summary.results) == len(ALL_DEMOS)
    assert summary.failed == 1
    assert summary.verdict == "partial"


def test_demo_output_goes_to_output_console(console):
    narration = Console(file=io.StringIO(), width=200)
    run_demo("bank", console, output=narration)
    assert "Running:" in console.file.getvalue()
    assert "Account" in narration.file.getvalue()
    assert "Account" not in console.file.getvalue()


# --- Models ---

def test_summary_verdicts():
    assert RunSummary().verdict == "no-demos"
    ok = DemoResult("a", RunStatus.PASSED, 0.5)
    bad = DemoResult("b", RunStatus.FAILED, 0.25, "boom")
    assert RunSummary([ok]).verdict == "pass"
    assert RunSummary([bad]).verdict == "fail"
    summary = RunSummary([ok, bad])
    assert summary.verdict == "partial"
    assert summary.total_wall_clock_s == 0.75


def test_result_dict_roundtrip():
    r = DemoResult("coffee", RunStatus.FAILED, 1.5, "ValueError: nope")
    assert r.to_dict()["status"] == "failed"
    assert DemoResult.from_dict(r.to_dict()) == r


def test_summary_save_and_load(tmp_path):
    summary = RunSummary([
        DemoResult("coffee", RunStatus.PASSED, 0.5),
        DemoResult("bank", RunStatus.FAILED, 0.25, "ValueError: nope"),
    ])
    path = tmp_path / "out" / "summary.json"
    summary.save(path)
    loaded = RunSummary.load(path)
    assert loaded == summary
    assert loaded.verdict == "partial"


def test_summary_load_missing_or_corrupt(tmp_path):
    assert RunSummary.load(tmp_path / "absent.json") is None
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert RunSummary.load(bad) is None
