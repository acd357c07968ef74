"""Validation Results Reporting

Text for the terminal and a JSON document for tooling, both built
from run_all_scenarios() output.
"""

from datetime import datetime, timezone

from .sim import SimResult

RULE = "-" * 60


def format_seed_line(seed: int, run) -> str:
    """One line per seeded run: the estimate, or why there is none."""
    if run.ok:
        return f"    seed {seed:>6}  pi ~ {run.estimate:.6f}  abs err {run.abs_error:.6f}"
    return f"    seed {seed:>6}  {run.error_type}: {run.error}"


def format_result_summary(result: SimResult) -> str:
    """Per-seed breakdown of one scenario, with any violations."""
    config = result.config
    verdict = "PASS" if result.success else "FAIL"
    lines = [
        RULE,
        f"  {config.name} [{config.method}] {verdict} in {result.duration_ms:.1f}ms",
    ]
    if config.description:
        lines.append(f"  {config.description}")
    if config.params:
        params = ", ".join(f"{k}={v}" for k, v in config.params.items())
        lines.append(f"  params: {params}")

    for seed, run in zip(config.seeds, result.results):
        lines.append(format_seed_line(seed, run))

    if "mean_estimate" in result.metrics:
        lines.append(f"  mean {result.metrics['mean_estimate']:.6f}, "
                     f"worst abs err {result.metrics['max_abs_error']:.6f}")

    for v in result.violations:
        detail = {k: val for k, val in v.items() if k != "type"}
        lines.append(f"  ! {v['type']} {detail}")

    return "\n".join(lines)


def format_all_results(results: dict) -> str:
    """One row per scenario plus the overall verdict."""
    scenarios = results.get("scenarios", {})
    passed = sum(1 for s in scenarios.values() if s["success"])
    overall = "ALL PASSED" if results.get("all_passed") else "SOME FAILED"

    lines = [
        RULE,
        f"  montepi validation: {overall} ({passed}/{len(scenarios)})",
        f"  {results.get('timestamp', 'N/A')}",
        RULE,
    ]
    for name, data in scenarios.items():
        mark = "ok" if data["success"] else "XX"
        worst = data.get("metrics", {}).get("max_abs_error")
        worst_text = f"{worst:.5f}" if worst is not None else "-"
        lines.append(f"  {mark} {name:22} {data.get('method', ''):15} "
                     f"worst err {worst_text:>8}  {len(data.get('violations', []))} violations")
    lines.append(RULE)

    return "\n".join(lines)


def generate_json_report(results: dict) -> dict:
    """Machine-readable validation report.

    Per-seed runs are included when run_all_scenarios() kept the
    SimResult objects.
    """
    scenarios = results.get("scenarios", {})
    sims = results.get("sim_results", {})

    report = {
        "report_type": "validation_report",
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "summary": {
            "all_passed": results.get("all_passed", False),
            "total_scenarios": len(scenarios),
            "passed": sum(1 for s in scenarios.values() if s["success"]),
            "failed": sum(1 for s in scenarios.values() if not s["success"])
        },
        "scenarios": {}
    }

    for name, data in scenarios.items():
        entry = {
            "success": data["success"],
            "method": data.get("method"),
            "duration_ms": data.get("duration_ms", 0),
            "metrics": data.get("metrics", {}),
            "violations": data.get("violations", [])
        }
        if name in sims:
            sim = sims[name]
            entry["runs"] = [
                {"seed": seed, **run.to_dict()}
                for seed, run in zip(sim.config.seeds, sim.results)
            ]
        report["scenarios"][name] = entry

    return report
