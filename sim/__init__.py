"""Validation Harness for montepi

Named scenarios that exercise every estimator:
1. CIRCLE_CONVERGENCE - circle inside square within tolerance of pi
2. NEEDLE_CONVERGENCE - Buffon's needle within tolerance of pi
3. WALK_CONVERGENCE - random walk within tolerance of pi
4. DETERMINISM - identical estimates under a repeated seed
5. INVALID_INPUT - zero samples rejected
"""

from .sim import SimConfig, SimResult, run_simulation, run_all_scenarios
from .scenarios import (
    CIRCLE_CONVERGENCE,
    NEEDLE_CONVERGENCE,
    WALK_CONVERGENCE,
    DETERMINISM,
    INVALID_INPUT,
)
