"""montepi - Approximating pi with Monte Carlo methods

Three independent estimators sharing an explicit random source:
- estimators.circle: points inside the unit circle
- estimators.needle: Buffon's needle crossings
- estimators.walk: mean distance of 1-D random walks

Supporting modules:
- core: error taxonomy, dual_hash, receipts and ledger
- random_source: seeded uniform draws and coin flips
- runner: run each method with fixed parameters, isolate failures
- reporting: console, JSON and ledger history reports
"""

__version__ = "1.0.0"
__author__ = "montepi Team"

from .core import EstimationError, InvalidInput, DegenerateResult, dual_hash, emit_receipt
from .random_source import RandomSource
from .estimators import circle_square, buffons_needle, random_walk
