"""Result Reporting

Console lines and JSON reports for a run, plus a pandas summary of
past runs read back from a ledger.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import pandas as pd

from config.constants import TRUE_PI
from .runner import EstimateResult, any_failed

HISTORY_COLUMNS = ["ts", "run_id", "method", "ok", "estimate",
                   "abs_error", "latency_ms", "error"]


def format_result_line(result: EstimateResult) -> str:
    """Format a single method's outcome as one console line.

    Args:
        result: Estimator result

    Returns:
        e.g. "buffons needle: pi = 3.14121  (abs err 0.00038)"
    """
    if result.ok:
        return (f"{result.label}: pi = {result.estimate}"
                f"  (abs err {result.abs_error:.5f})")
    return f"{result.label}: FAILED ({result.error_type}) {result.error}"


def format_run_report(results: list[EstimateResult], seed: Optional[int] = None) -> str:
    """Format all results of a run.

    Args:
        results: Results from run_all
        seed: Seed the run used, None if unseeded

    Returns:
        Formatted string
    """
    lines = [
        "=" * 60,
        "  Approximating pi with Monte Carlo methods",
        "=" * 60,
        f"  Seed: {seed if seed is not None else 'random'}",
        ""
    ]

    for result in results:
        lines.append("  " + format_result_line(result))

    lines.append("")
    lines.append(f"  reference: pi = {TRUE_PI}")

    if any_failed(results):
        failed = [r.label for r in results if not r.ok]
        lines.append(f"  Overall: FAILED ({', '.join(failed)})")
    else:
        lines.append("  Overall: OK")

    lines.append("")
    return "\n".join(lines)


def generate_json_report(
    results: list[EstimateResult],
    seed: Optional[int] = None,
    output_path: Optional[Path] = None
) -> dict:
    """Generate JSON report.

    Args:
        results: Results from run_all
        seed: Seed the run used
        output_path: Optional path to write JSON

    Returns:
        Report dict
    """
    report = {
        "report_type": "pi_estimates",
        "version": "1.0",
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "seed": seed,
        "true_pi": TRUE_PI,
        "summary": {
            "all_ok": not any_failed(results),
            "succeeded": sum(1 for r in results if r.ok),
            "failed": sum(1 for r in results if not r.ok)
        },
        "methods": [r.to_dict() for r in results]
    }

    if output_path:
        with open(output_path, "w") as f:
            json.dump(report, f, indent=2)

    return report


def history_frame(receipts: list[dict]) -> pd.DataFrame:
    """One row per estimate or anomaly receipt.

    Args:
        receipts: Receipts loaded from a ledger

    Returns:
        DataFrame with HISTORY_COLUMNS
    """
    rows = []
    for r in receipts:
        receipt_type = r.get("receipt_type")
        if receipt_type == "estimate":
            rows.append({
                "ts": r.get("ts"),
                "run_id": r.get("run_id"),
                "method": r.get("method"),
                "ok": True,
                "estimate": r.get("estimate"),
                "abs_error": r.get("abs_error"),
                "latency_ms": r.get("latency_ms", 0.0),
                "error": None
            })
        elif receipt_type == "anomaly" and r.get("method"):
            rows.append({
                "ts": r.get("ts"),
                "run_id": r.get("run_id"),
                "method": r.get("method"),
                "ok": False,
                "estimate": None,
                "abs_error": None,
                "latency_ms": r.get("latency_ms", 0.0),
                "error": r.get("error")
            })

    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def summarize_history(receipts: list[dict]) -> pd.DataFrame:
    """Per-method summary of past runs.

    Args:
        receipts: Receipts loaded from a ledger

    Returns:
        DataFrame indexed by method with runs, failures,
        mean_estimate, last_estimate, mean_abs_error
    """
    df = history_frame(receipts)
    columns = ["runs", "failures", "mean_estimate", "last_estimate", "mean_abs_error"]

    if df.empty:
        return pd.DataFrame(columns=columns).rename_axis("method")

    df["estimate"] = pd.to_numeric(df["estimate"])
    df["abs_error"] = pd.to_numeric(df["abs_error"])

    grouped = df.groupby("method", sort=True)
    summary = pd.DataFrame({
        "runs": grouped.size(),
        "failures": grouped["ok"].apply(lambda s: int((~s.astype(bool)).sum())),
        "mean_estimate": grouped["estimate"].mean(),
        "last_estimate": grouped["estimate"].apply(
            lambda s: s.dropna().iloc[-1] if s.notna().any() else float("nan")),
        "mean_abs_error": grouped["abs_error"].mean()
    })
    return summary[columns]


def format_history(receipts: list[dict]) -> str:
    """Format the per-method ledger summary for the console."""
    summary = summarize_history(receipts)
    if summary.empty:
        return "No estimates recorded yet"
    return summary.to_string(float_format=lambda v: f"{v:.6f}")
