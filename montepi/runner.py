"""Estimator Runner

Runs each estimator with fixed parameters, isolates failures per
method, and records one receipt per method.
"""

import time
from dataclasses import dataclass
from typing import Optional

from config.constants import (
    TRUE_PI,
    METHOD_LABELS,
    METHOD_ORDER,
    WALK_COUNT,
    WALK_STEPS,
    NEEDLE_DROPS,
    NEEDLE_LENGTH,
    LINE_SPACING,
    CIRCLE_SAMPLES,
)
from .core import EstimationError, emit_receipt, emit_failure
from .estimators import ESTIMATORS
from .random_source import RandomSource


@dataclass
class EstimateResult:
    """Outcome of running one estimator."""
    method: str
    label: str
    params: dict
    estimate: Optional[float] = None
    abs_error: Optional[float] = None
    rel_error: Optional[float] = None
    latency_ms: float = 0.0
    error: Optional[str] = None
    error_type: Optional[str] = None
    receipt: Optional[dict] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "method": self.method,
            "label": self.label,
            "params": dict(self.params),
            "estimate": self.estimate,
            "abs_error": self.abs_error,
            "rel_error": self.rel_error,
            "latency_ms": self.latency_ms,
            "ok": self.ok,
            "error": self.error,
            "error_type": self.error_type,
        }


# (method, params) in run order
DEFAULT_PLAN = [
    ("random_walk", {"walks": WALK_COUNT, "steps": WALK_STEPS}),
    ("buffons_needle", {"n": NEEDLE_DROPS,
                        "needle_length": NEEDLE_LENGTH,
                        "line_spacing": LINE_SPACING}),
    ("circle_square", {"n": CIRCLE_SAMPLES}),
]


def run_method(
    method: str,
    source: RandomSource,
    silent: bool = True,
    **params
) -> EstimateResult:
    """Run one estimator and capture its outcome.

    InvalidInput and DegenerateResult become a failed result with an
    anomaly receipt. Anything else propagates.

    Args:
        method: Registered method name (random_walk, buffons_needle, circle_square)
        source: Random source passed to the estimator
        silent: Whether to suppress echoing receipts to stderr
        **params: Estimator parameters

    Returns:
        EstimateResult

    Raises:
        ValueError: If method is not registered
    """
    if method not in ESTIMATORS:
        raise ValueError(f"Unknown method '{method}'")

    estimator = ESTIMATORS[method]
    result = EstimateResult(
        method=method,
        label=METHOD_LABELS.get(method, method),
        params=params
    )

    start_time = time.perf_counter()
    try:
        estimate = estimator(source=source, **params)
    except EstimationError as e:
        result.latency_ms = (time.perf_counter() - start_time) * 1000
        result.error = e.message
        result.error_type = type(e).__name__
        result.receipt = emit_failure(e, latency_ms=result.latency_ms, silent=silent)
        return result

    result.latency_ms = (time.perf_counter() - start_time) * 1000
    result.estimate = estimate
    result.abs_error = abs(estimate - TRUE_PI)
    result.rel_error = result.abs_error / TRUE_PI

    result.receipt = emit_receipt("estimate", {
        "method": method,
        "params": params,
        "seed": source.seed,
        "estimate": estimate,
        "abs_error": result.abs_error,
        "rel_error": result.rel_error,
        "latency_ms": result.latency_ms
    }, silent=silent)

    return result


def run_all(
    source: RandomSource,
    plan: Optional[list] = None,
    silent: bool = True
) -> list[EstimateResult]:
    """Run every method in the plan sequentially.

    A failing method never stops the ones after it.

    Args:
        source: Random source shared by all methods
        plan: List of (method, params), defaults to DEFAULT_PLAN
        silent: Whether to suppress echoing receipts to stderr

    Returns:
        One EstimateResult per plan entry, in order
    """
    if plan is None:
        plan = DEFAULT_PLAN

    results = []
    for method, params in plan:
        results.append(run_method(method, source, silent=silent, **params))

    emit_receipt("run_complete", {
        "seed": source.seed,
        "methods": [r.method for r in results],
        "succeeded": sum(1 for r in results if r.ok),
        "failed": sum(1 for r in results if not r.ok),
        "total_latency_ms": sum(r.latency_ms for r in results)
    }, silent=silent)

    return results


def any_failed(results: list[EstimateResult]) -> bool:
    """Check whether any method in a run failed."""
    return any(not r.ok for r in results)


def plan_for(methods: list[str]) -> list:
    """Subset of DEFAULT_PLAN, kept in METHOD_ORDER.

    Raises:
        ValueError: If a method is not registered
    """
    unknown = [m for m in methods if m not in ESTIMATORS]
    if unknown:
        raise ValueError(f"Unknown method(s): {', '.join(unknown)}")
    wanted = set(methods)
    ordered = [m for m in METHOD_ORDER if m in wanted]
    params = dict(DEFAULT_PLAN)
    return [(m, params[m]) for m in ordered]
