#!/usr/bin/env python3
"""montepi CLI

Approximate pi with three Monte Carlo methods and print the results.

Usage:
    python cli.py                      # Run all three methods, fixed parameters
    python cli.py --seed 42            # Reproducible run
    python cli.py --ledger runs.jsonl  # Also append receipts to a ledger
    python cli.py --json               # JSON report instead of text
    python cli.py -m circle_square     # Only one method
    python cli.py trace 100000         # Running estimate for circle inside square
    python cli.py history --ledger runs.jsonl
    python cli.py --validate [--full]  # Convergence/determinism scenarios
    python cli.py --validate --json    # Validation report as JSON on stdout
    python cli.py --test               # Smoke test

Exit status: every method is always attempted. The exit code is 1 if
any method failed (for example zero needle crossings), otherwise 0.
"""

import argparse
import json
import sys
from pathlib import Path

# Ensure montepi, config and sim are importable from a checkout
sys.path.insert(0, str(Path(__file__).parent))

from config.constants import (
    CIRCLE_SAMPLES,
    DEFAULT_SEED,
    EXIT_OK,
    EXIT_METHOD_FAILED,
    METHOD_ORDER,
    TRACE_CHECKPOINTS,
    TRUE_PI,
)
from montepi.core import (
    emit_receipt,
    load_receipts,
    reset_receipt_counter,
    set_ledger_path,
    InvalidInput,
)
from montepi.estimators import circle_square_trace
from montepi.random_source import RandomSource
from montepi.reporting import format_run_report, format_history, generate_json_report
from montepi.runner import run_all, run_method, any_failed, plan_for


def run_estimates(seed=DEFAULT_SEED, methods=None, as_json: bool = False,
                  verbose: bool = False) -> int:
    """Run the three estimators with fixed parameters and print results.

    Args:
        seed: Seed for the shared random source, None for OS entropy
        methods: Only run these methods (default: all three)
        as_json: Print a JSON report instead of text
        verbose: Echo receipts to stderr

    Returns:
        Exit code
    """
    source = RandomSource(seed)

    print("Approximating pi...", file=sys.stderr)
    plan = plan_for(methods) if methods else None
    results = run_all(source, plan=plan, silent=not verbose)

    if as_json:
        print(json.dumps(generate_json_report(results, seed=seed), indent=2))
    else:
        print(format_run_report(results, seed=seed))

    return EXIT_METHOD_FAILED if any_failed(results) else EXIT_OK


def run_trace(n: int = CIRCLE_SAMPLES, seed=DEFAULT_SEED,
              checkpoints: int = TRACE_CHECKPOINTS) -> int:
    """Print the running circle-inside-square estimate as points accumulate.

    Args:
        n: Total sample points
        seed: Random seed
        checkpoints: Number of evenly spaced lines to print

    Returns:
        Exit code
    """
    source = RandomSource(seed)
    try:
        for samples, estimate in circle_square_trace(n, source, checkpoints):
            print(f"{samples:>12}  pi = {estimate:.6f}  (abs err {abs(estimate - TRUE_PI):.6f})")
    except InvalidInput as e:
        print(f"circle inside square: FAILED (InvalidInput) {e.message}", file=sys.stderr)
        return EXIT_METHOD_FAILED
    return EXIT_OK


def run_history(ledger: Path) -> int:
    """Summarize a ledger of past runs."""
    receipts = load_receipts(ledger)
    print(f"\n=== HISTORY ({ledger}) ===\n")
    print(format_history(receipts))
    return EXIT_OK


def run_validation(full: bool = False, as_json: bool = False,
                   verbose: bool = False) -> bool:
    """Run validation scenarios.

    Args:
        full: Run the full scenarios instead of the quick ones
        as_json: Print the JSON validation report to stdout
        verbose: Print a per-seed breakdown of every scenario to stderr

    Returns:
        True if all passed
    """
    from sim.sim import run_all_scenarios
    from sim.scenarios import ALL_SCENARIOS, QUICK_SCENARIOS
    from sim.reporting import format_all_results, format_result_summary
    from sim.reporting import generate_json_report as validation_json_report

    scenarios = ALL_SCENARIOS if full else QUICK_SCENARIOS
    print("Running validation scenarios...\n", file=sys.stderr)

    results = run_all_scenarios(scenarios, progress=True)

    if verbose:
        for sim in results["sim_results"].values():
            print(format_result_summary(sim), file=sys.stderr)

    if as_json:
        print(json.dumps(validation_json_report(results), indent=2))
    else:
        print(format_all_results(results), file=sys.stderr)

    emit_receipt("validation", {
        "status": "passed" if results["all_passed"] else "failed",
        "scenarios": len(results["scenarios"])
    })

    return results["all_passed"]


def run_test() -> bool:
    """Run smoke test - small seeded runs of every method."""
    reset_receipt_counter()

    results = run_all(RandomSource(42), plan=[
        ("random_walk", {"walks": 200, "steps": 50}),
        ("buffons_needle", {"n": 2_000}),
        ("circle_square", {"n": 2_000}),
    ])
    assert len(results) == 3, "Should run 3 methods"
    assert not any_failed(results), "No method should fail at these sizes"
    assert all(r.estimate > 0 for r in results)

    rejected = run_method("circle_square", RandomSource(42), n=0)
    assert rejected.error_type == "InvalidInput", "n = 0 must be rejected"

    emit_receipt("test_complete", {
        "methods": [r.method for r in results],
        "estimates": [r.estimate for r in results]
    })

    print("\nAll smoke tests passed\n", file=sys.stderr)
    return True


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="montepi - Approximating pi with Monte Carlo methods",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  (none)                    Run random walk, Buffon's needle and circle inside square
  trace [N]                 Running circle-inside-square estimate over N points
  history                   Summarize the ledger given with --ledger

Every method is attempted even if an earlier one fails.
Exit status is 1 if any method failed, 0 otherwise.
        """
    )

    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=DEFAULT_SEED,
        help="Random seed (default: nondeterministic)"
    )

    parser.add_argument(
        "--ledger", "-l",
        type=Path,
        metavar="PATH",
        help="Append receipts to this JSONL ledger"
    )

    parser.add_argument(
        "--method", "-m",
        action="append",
        choices=METHOD_ORDER,
        help="Only run this method (repeatable)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report (also with --validate)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Echo receipts to stderr; with --validate, per-seed breakdown"
    )

    parser.add_argument(
        "--validate", "-v",
        action="store_true",
        help="Run validation scenarios"
    )

    parser.add_argument(
        "--full",
        action="store_true",
        help="With --validate, run the full scenarios"
    )

    parser.add_argument(
        "--test", "-t",
        action="store_true",
        help="Run smoke test"
    )

    parser.add_argument(
        "command",
        nargs="?",
        choices=["trace", "history"],
        help="Optional command (trace, history)"
    )

    parser.add_argument(
        "arg",
        nargs="?",
        type=int,
        help="Sample count for trace"
    )

    args = parser.parse_args(argv)

    set_ledger_path(args.ledger)

    if args.command == "history":
        if args.ledger is None:
            parser.error("history requires --ledger PATH")
        sys.exit(run_history(args.ledger))

    elif args.command == "trace":
        n = args.arg if args.arg is not None else CIRCLE_SAMPLES
        sys.exit(run_trace(n, seed=args.seed))

    if args.test:
        success = run_test()
        sys.exit(0 if success else 1)

    elif args.validate:
        success = run_validation(full=args.full, as_json=args.json,
                                 verbose=args.verbose)
        sys.exit(0 if success else 1)

    sys.exit(run_estimates(seed=args.seed, methods=args.method,
                           as_json=args.json, verbose=args.verbose))


if __name__ == "__main__":
    main()
