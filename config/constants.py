"""montepi Constants

Single source of truth for all parameters and tolerances.
No magic numbers in module code.
"""

import math

# =============================================================================
# REFERENCE VALUE
# =============================================================================

TRUE_PI = math.pi

# =============================================================================
# DRIVER PARAMETERS (fixed iteration counts)
# =============================================================================

# Random walk: 10,000 walks of 100 steps each
WALK_COUNT = 10_000
WALK_STEPS = 100

# Buffon's needle: 1,000,000 drops, needle as long as the line spacing
NEEDLE_DROPS = 1_000_000
NEEDLE_LENGTH = 1.0           # l
LINE_SPACING = 1.0            # t, must satisfy l <= t

# Circle inside square: 1,000,000 points in [-1, 1] x [-1, 1]
CIRCLE_SAMPLES = 1_000_000

# Seed for the shared random source; None draws from OS entropy
DEFAULT_SEED = None

# =============================================================================
# METHOD LABELS
# =============================================================================

METHOD_LABELS = {
    "random_walk": "random walk",
    "buffons_needle": "buffons needle",
    "circle_square": "circle inside square",
}

# Order the driver runs them in
METHOD_ORDER = ["random_walk", "buffons_needle", "circle_square"]

# =============================================================================
# TRACE (running estimate for circle inside square)
# =============================================================================

TRACE_CHECKPOINTS = 10        # Number of evenly spaced checkpoints

# =============================================================================
# VALIDATION (convergence and determinism)
# =============================================================================

CONVERGENCE_TOLERANCE = 0.05  # |estimate - pi| allowed for circle and needle
WALK_TOLERANCE = 0.1          # Walk estimator is noisier and biased high at 100 steps

VALIDATION_SEEDS = [42, 123, 456]
QUICK_VALIDATION_SEED = 42

# Sample sizes used by the validation scenarios
VALIDATION_CIRCLE_SAMPLES = 200_000
VALIDATION_NEEDLE_DROPS = 200_000
VALIDATION_WALK_COUNT = 50_000
VALIDATION_WALK_STEPS = 100

# Circle-square estimates are ratio-bounded
CIRCLE_BOUNDS = (0.0, 4.0)

# =============================================================================
# EXIT CODES
# =============================================================================

EXIT_OK = 0
EXIT_METHOD_FAILED = 1        # At least one method failed; the others still ran
