"""Random Walk

The mean absolute displacement of a symmetric +/-1 walk of N steps
approaches sqrt(2N / pi), so pi ~ 2N / d_avg^2.
"""

from ..core import DegenerateResult, check_count
from ..random_source import RandomSource

METHOD = "random_walk"


def walk_distance(steps: int, source: RandomSource) -> int:
    """Walk from 0 and return the absolute final distance."""
    position = 0
    for _ in range(steps):
        if source.next_bool():
            position += 1
        else:
            position -= 1
    return abs(position)


def random_walk(walks: int, steps: int, source: RandomSource) -> float:
    """Estimate pi from the average distance of repeated 1-D walks.

    Args:
        walks: Number of independent walks (>= 1)
        steps: Steps per walk (>= 1)
        source: Random source providing next_bool()

    Returns:
        Positive finite estimate

    Raises:
        InvalidInput: If walks or steps is not an integer >= 1
        DegenerateResult: If every walk ended at the origin
    """
    check_count(walks, "walks", METHOD)
    check_count(steps, "steps", METHOD)

    sum_of_abs_distances = 0
    for _ in range(walks):
        sum_of_abs_distances += walk_distance(steps, source)

    average_distance = sum_of_abs_distances / walks
    if average_distance == 0:
        raise DegenerateResult(f"all {walks} walks ended at the origin",
                               method=METHOD, parameter="walks")

    return 2.0 * steps / (average_distance * average_distance)
