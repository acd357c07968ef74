"""Monte Carlo Pi Estimators

Three independent estimators. Each takes its parameters plus an
explicit random source and returns a single estimate of pi.
"""

from .circle import circle_square, circle_square_trace, is_inside_unit_circle
from .needle import buffons_needle, needle_crosses
from .walk import random_walk, walk_distance

# Method name -> estimator function
ESTIMATORS = {
    "random_walk": random_walk,
    "buffons_needle": buffons_needle,
    "circle_square": circle_square,
}

__all__ = [
    "circle_square",
    "circle_square_trace",
    "is_inside_unit_circle",
    "buffons_needle",
    "needle_crosses",
    "random_walk",
    "walk_distance",
    "ESTIMATORS",
]
