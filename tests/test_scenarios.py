"""Tests for validation scenarios."""

import pytest

from sim.sim import SimConfig, run_simulation, run_all_scenarios, quick_test
from sim.scenarios import (
    CIRCLE_CONVERGENCE,
    NEEDLE_CONVERGENCE,
    WALK_CONVERGENCE,
    DETERMINISM,
    INVALID_INPUT,
    QUICK_SCENARIOS,
    get_scenario_by_name,
    list_scenarios,
)
from sim.reporting import format_result_summary, format_all_results, generate_json_report


class TestQuickTest:
    """Tests for quick validation."""

    def test_circle(self):
        assert quick_test("circle_square")

    def test_needle(self):
        assert quick_test("buffons_needle")

    def test_impossible_tolerance_fails(self):
        assert not quick_test("circle_square", n=100, tolerance=0.0)


class TestSimConfig:
    """Tests for scenario configuration."""

    def test_config_defaults(self):
        config = SimConfig(name="test", method="circle_square")
        assert config.seeds == [42]
        assert config.params == {}
        assert config.success_criteria == {}

    def test_seeds_not_shared(self):
        a = SimConfig(name="a", method="circle_square")
        b = SimConfig(name="b", method="circle_square")
        a.seeds.append(1)
        assert b.seeds == [42]


class TestScenarioList:
    """Tests for scenario utilities."""

    def test_list_scenarios(self):
        names = list_scenarios()
        assert names == [
            "CIRCLE_CONVERGENCE",
            "NEEDLE_CONVERGENCE",
            "WALK_CONVERGENCE",
            "DETERMINISM",
            "INVALID_INPUT",
        ]

    def test_get_scenario_by_name(self):
        assert get_scenario_by_name("DETERMINISM") is DETERMINISM
        assert get_scenario_by_name("QUICK_CIRCLE").method == "circle_square"

    def test_unknown_scenario_raises(self):
        with pytest.raises(ValueError):
            get_scenario_by_name("NONEXISTENT")


class TestCriteria:
    """Tests for individual success criteria."""

    def test_no_criteria_passes(self):
        result = run_simulation(SimConfig(name="t", method="circle_square", params={"n": 10}))
        assert result.success
        assert result.metrics["runs"] == 1

    def test_bounds(self):
        config = SimConfig(
            name="t", method="circle_square", params={"n": 100}, seeds=[1, 2],
            success_criteria={"bounds": (3.9, 4.0)}
        )
        result = run_simulation(config)
        assert not result.success
        assert {v["type"] for v in result.violations} == {"out_of_bounds"}

    def test_failures_counted(self):
        config = SimConfig(
            name="t", method="random_walk", params={"walks": 0, "steps": 5},
            success_criteria={"max_failures": 0}
        )
        result = run_simulation(config)
        assert not result.success
        assert result.violations[0]["type"] == "method_failed"
        assert result.violations[0]["error_type"] == "InvalidInput"

    def test_expect_error_mismatch(self):
        config = SimConfig(
            name="t", method="circle_square", params={"n": 10},
            success_criteria={"expect_error": "InvalidInput"}
        )
        result = run_simulation(config)
        assert not result.success
        assert result.violations[0]["type"] == "expected_error"

    def test_deterministic(self):
        config = SimConfig(
            name="t", method="random_walk", params={"walks": 100, "steps": 10},
            seeds=[1, 2], success_criteria={"deterministic": True}
        )
        assert run_simulation(config).success


class TestScenarios:
    """Run the shipped scenarios."""

    def test_quick_scenarios_pass(self):
        results = run_all_scenarios(QUICK_SCENARIOS)
        assert results["all_passed"], results

    def test_invalid_input_scenario(self):
        assert run_simulation(INVALID_INPUT).success

    def test_determinism_scenario(self):
        assert run_simulation(DETERMINISM).success

    def test_circle_convergence(self):
        result = run_simulation(CIRCLE_CONVERGENCE)
        assert result.success, result.violations
        assert result.metrics["max_abs_error"] < 0.05

    def test_needle_convergence(self):
        result = run_simulation(NEEDLE_CONVERGENCE)
        assert result.success, result.violations

    def test_walk_convergence(self):
        result = run_simulation(WALK_CONVERGENCE)
        assert result.success, result.violations


class TestReporting:
    """Tests for scenario report formatting."""

    def test_summary_text(self):
        result = run_simulation(INVALID_INPUT)
        text = format_result_summary(result)
        assert "INVALID_INPUT [circle_square] PASS" in text
        assert "InvalidInput: n must be >= 1" in text

    def test_summary_lists_each_seed(self):
        config = SimConfig(name="t", method="circle_square", params={"n": 50}, seeds=[3, 4])
        text = format_result_summary(run_simulation(config))
        assert "seed      3  pi ~" in text
        assert "seed      4  pi ~" in text
        assert "params: n=50" in text

    def test_summary_shows_violations(self):
        config = SimConfig(
            name="t", method="circle_square", params={"n": 100},
            success_criteria={"bounds": (3.9, 4.0)}
        )
        text = format_result_summary(run_simulation(config))
        assert "FAIL" in text
        assert "! out_of_bounds" in text

    def test_all_results(self):
        results = run_all_scenarios(QUICK_SCENARIOS)
        text = format_all_results(results)
        assert "ALL PASSED" in text
        assert f"({len(QUICK_SCENARIOS)}/{len(QUICK_SCENARIOS)})" in text
        assert "QUICK_CIRCLE" in text

    def test_json_report(self):
        results = run_all_scenarios(QUICK_SCENARIOS)
        report = generate_json_report(results)
        assert report["report_type"] == "validation_report"
        assert report["summary"]["total_scenarios"] == len(QUICK_SCENARIOS)
        assert report["summary"]["failed"] == 0

        circle = report["scenarios"]["QUICK_CIRCLE"]
        assert circle["method"] == "circle_square"
        assert circle["runs"][0]["ok"] is True
        assert circle["runs"][0]["seed"] == get_scenario_by_name("QUICK_CIRCLE").seeds[0]

    def test_json_report_without_sim_results(self):
        """A plain summary dict still produces a report, minus per-seed runs."""
        results = run_all_scenarios(QUICK_SCENARIOS)
        del results["sim_results"]
        report = generate_json_report(results)
        assert "runs" not in report["scenarios"]["QUICK_CIRCLE"]


class TestProgress:
    """Tests for run_all_scenarios progress output."""

    def test_progress_on_stderr(self, capsys):
        run_all_scenarios(QUICK_SCENARIOS, progress=True)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Running QUICK_CIRCLE... PASS" in captured.err

    def test_keeps_sim_results(self):
        results = run_all_scenarios(QUICK_SCENARIOS)
        assert set(results["sim_results"]) == set(results["scenarios"])
