"""Buffon's Needle

A needle of length l dropped n times on a floor ruled with parallel
lines t apart crosses a line x times; for l <= t, pi ~ 2nl / (xt).
"""

import math

from ..core import InvalidInput, DegenerateResult, check_count, check_length
from ..random_source import RandomSource

METHOD = "buffons_needle"


def needle_crosses(offset: float, angle: float, needle_length: float) -> bool:
    """Check whether a needle crosses the nearest line.

    Args:
        offset: Distance from needle center to nearest line, in [0, t/2]
        angle: Angle between needle and lines, in [0, pi/2]
        needle_length: Needle length l

    Returns:
        True if the needle reaches the line
    """
    return offset <= (needle_length / 2.0) * math.sin(angle)


def buffons_needle(
    n: int,
    source: RandomSource,
    needle_length: float = 1.0,
    line_spacing: float = 1.0
) -> float:
    """Estimate pi by simulating needle drops across parallel lines.

    Only the short-needle case (needle_length <= line_spacing) is
    supported; the long-needle crossing probability has a different form.

    Args:
        n: Number of needle drops (>= 1)
        source: Random source providing next_uniform()
        needle_length: Needle length l (finite, > 0)
        line_spacing: Distance t between lines (finite, > 0, >= l)

    Returns:
        Positive finite estimate

    Raises:
        InvalidInput: If a precondition is violated
        DegenerateResult: If no drop crossed a line
    """
    check_count(n, "n", METHOD)
    check_length(needle_length, "needle_length", METHOD)
    check_length(line_spacing, "line_spacing", METHOD)
    if needle_length > line_spacing:
        raise InvalidInput(
            f"needle length {needle_length} exceeds line spacing {line_spacing}",
            method=METHOD, parameter="needle_length")

    half_spacing = line_spacing / 2.0
    half_turn = math.pi / 2.0

    crossed = 0
    for _ in range(n):
        offset = source.next_uniform(0.0, half_spacing)
        angle = source.next_uniform(0.0, half_turn)
        if needle_crosses(offset, angle, needle_length):
            crossed += 1

    if crossed == 0:
        raise DegenerateResult(f"no needle crossed a line in {n} drops",
                               method=METHOD, parameter="n")

    return (2.0 * n * needle_length) / (crossed * line_spacing)
