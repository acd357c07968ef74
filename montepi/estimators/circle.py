"""Circle Inside Square

Points uniform in [-1, 1] x [-1, 1]. The inscribed unit circle covers
pi/4 of the square, so pi ~ 4 * inside / total.
"""

from typing import Iterator, Optional

from ..core import check_count
from ..random_source import RandomSource

METHOD = "circle_square"


def is_inside_unit_circle(x: float, y: float) -> bool:
    """Boundary points count as inside."""
    return x * x + y * y <= 1.0


def circle_square(n: int, source: RandomSource) -> float:
    """Estimate pi from the fraction of points inside the unit circle.

    Args:
        n: Number of sample points (>= 1)
        source: Random source providing next_symmetric()

    Returns:
        Estimate in [0, 4]

    Raises:
        InvalidInput: If n is not an integer >= 1
    """
    check_count(n, "n", METHOD)

    inside = 0
    for _ in range(n):
        x = source.next_symmetric()
        y = source.next_symmetric()
        if is_inside_unit_circle(x, y):
            inside += 1

    return 4.0 * inside / n


def circle_square_trace(
    n: int,
    source: RandomSource,
    checkpoints: Optional[int] = None
) -> Iterator[tuple[int, float]]:
    """Yield the running estimate as points accumulate.

    Draws the same sequence as circle_square(), so the last value
    yielded equals circle_square(n, source) for an identically seeded
    source.

    Args:
        n: Total number of sample points (>= 1)
        source: Random source providing next_symmetric()
        checkpoints: How many evenly spaced reports (default: one per point)

    Yields:
        (samples_so_far, running_estimate)

    Raises:
        InvalidInput: If n or checkpoints is not an integer >= 1
    """
    check_count(n, "n", METHOD)
    if checkpoints is not None:
        check_count(checkpoints, "checkpoints", METHOD)

    every = 1 if checkpoints is None else max(1, n // checkpoints)

    inside = 0
    for i in range(1, n + 1):
        x = source.next_symmetric()
        y = source.next_symmetric()
        if is_inside_unit_circle(x, y):
            inside += 1
        if i % every == 0 or i == n:
            yield i, 4.0 * inside / i
