"""Tests for the command line entry point."""

import json
import pytest

import cli
from montepi.core import load_receipts

SMALL_PLAN = [
    ("random_walk", {"walks": 200, "steps": 50}),
    ("buffons_needle", {"n": 2_000, "needle_length": 1.0, "line_spacing": 1.0}),
    ("circle_square", {"n": 2_000}),
]


@pytest.fixture
def small_plan(monkeypatch):
    """Swap the fixed million-sample plan for a quick one."""
    monkeypatch.setattr("montepi.runner.DEFAULT_PLAN", list(SMALL_PLAN))
    return SMALL_PLAN


def _exit_code(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    return exc.value.code


class TestRun:
    """Tests for the default run."""

    def test_no_arguments(self, small_plan, capsys):
        """Bare invocation runs all three methods and exits 0."""
        assert _exit_code([]) == 0

        out = capsys.readouterr().out
        assert "random walk: pi = " in out
        assert "buffons needle: pi = " in out
        assert "circle inside square: pi = " in out
        assert "Overall: OK" in out

    def test_seeded_runs_repeat(self, small_plan, capsys):
        _exit_code(["--seed", "42"])
        first = capsys.readouterr().out
        _exit_code(["--seed", "42"])
        assert capsys.readouterr().out == first

    def test_failure_exits_nonzero_but_runs_the_rest(self, monkeypatch, capsys):
        plan = [("random_walk", {"walks": 0, "steps": 10})] + SMALL_PLAN[1:]
        monkeypatch.setattr("montepi.runner.DEFAULT_PLAN", plan)

        assert _exit_code(["--seed", "1"]) == 1

        out = capsys.readouterr().out
        assert "random walk: FAILED (InvalidInput)" in out
        assert "buffons needle: pi = " in out
        assert "circle inside square: pi = " in out

    def test_json(self, small_plan, capsys):
        assert _exit_code(["--seed", "3", "--json"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["seed"] == 3
        assert report["summary"]["succeeded"] == 3

    def test_method_filter(self, small_plan, capsys):
        assert _exit_code(["-m", "circle_square", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "circle inside square" in out
        assert "random walk" not in out

    def test_ledger(self, small_plan, tmp_path, capsys):
        path = tmp_path / "runs.jsonl"
        _exit_code(["--seed", "5", "--ledger", str(path)])

        types = [r["receipt_type"] for r in load_receipts(path)]
        assert types.count("estimate") == 3
        assert types[-1] == "run_complete"

    def test_verbose_receipts_on_stderr(self, small_plan, capsys):
        _exit_code(["--seed", "5", "--verbose"])
        captured = capsys.readouterr()
        assert '"receipt_type": "estimate"' in captured.err
        assert "receipt_type" not in captured.out


class TestCommands:
    """Tests for trace, history, validate and test."""

    def test_trace(self, capsys):
        assert _exit_code(["trace", "1000", "--seed", "2"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 10
        assert lines[-1].split()[0] == "1000"

    def test_trace_invalid(self, capsys):
        assert _exit_code(["trace", "0"]) == 1
        assert "InvalidInput" in capsys.readouterr().err

    def test_history(self, small_plan, tmp_path, capsys):
        path = tmp_path / "runs.jsonl"
        _exit_code(["--seed", "5", "--ledger", str(path)])
        capsys.readouterr()

        assert _exit_code(["history", "--ledger", str(path)]) == 0
        out = capsys.readouterr().out
        assert "circle_square" in out
        assert "runs" in out

    def test_history_requires_ledger(self):
        assert _exit_code(["history"]) == 2

    def test_validate(self, capsys):
        assert _exit_code(["--validate"]) == 0
        assert "ALL PASSED" in capsys.readouterr().err

    def test_validate_progress_kept_off_stdout(self, capsys):
        assert _exit_code(["--validate"]) == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Running QUICK_CIRCLE... PASS" in captured.err

    def test_validate_json(self, capsys):
        assert _exit_code(["--validate", "--json"]) == 0
        captured = capsys.readouterr()
        report = json.loads(captured.out)
        assert report["report_type"] == "validation_report"
        assert report["summary"]["all_passed"] is True
        assert "QUICK_NEEDLE" in report["scenarios"]
        assert "Running" not in captured.out

    def test_validate_verbose(self, capsys):
        assert _exit_code(["--validate", "--verbose"]) == 0
        err = capsys.readouterr().err
        assert "QUICK_WALK_INVALID [random_walk] PASS" in err
        assert "InvalidInput: walks must be >= 1" in err

    def test_smoke_test(self):
        assert _exit_code(["--test"]) == 0
