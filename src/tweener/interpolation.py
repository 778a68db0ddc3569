"""Interpolation functions over sequences of control points.

Each function takes an ordered sequence of control points and a normalized
position k, and returns the blended value. Control points are plain numbers
or numpy arrays of equal shape (for paths through 2D/3D space). Positions
outside 0.0 to 1.0 extrapolate.
"""

from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Sequence
import math

import numpy as np


# Type alias for interpolation functions
InterpolationFunc = Callable[[Sequence[Any], float], Any]


def blend(p0: Any, p1: Any, t: float) -> Any:
    """Straight-line blend between two points; t may leave 0..1."""
    return (p1 - p0) * t + p0


@lru_cache(maxsize=None)
def factorial(n: int) -> int:
    """Memoized factorial, kept for the lifetime of the process."""
    return math.factorial(n)


def bernstein(n: int, i: int) -> float:
    """Binomial coefficient C(n, i) used as a Bernstein basis weight."""
    return factorial(n) / factorial(i) / factorial(n - i)


def catmull_rom_segment(p0: Any, p1: Any, p2: Any, p3: Any, t: float) -> Any:
    """Evaluate the cubic between p1 and p2 with centered-difference tangents."""
    v0 = (p2 - p0) * 0.5
    v1 = (p3 - p1) * 0.5
    t2 = t * t
    t3 = t * t2
    return (
        (2 * p1 - 2 * p2 + v0 + v1) * t3
        + (-3 * p1 + 3 * p2 - 2 * v0 - v1) * t2
        + v0 * t
        + p1
    )


def linear(v: Sequence[Any], k: float) -> Any:
    """Piecewise-linear path through the control points.

    Below 0 the slope of the first segment is extended, above 1 the slope
    of the last one.
    """
    m = len(v) - 1
    if m == 0:
        return v[0]

    f = m * k
    i = math.floor(f)

    if k < 0:
        return blend(v[0], v[1], f)
    if k > 1:
        return blend(v[m], v[m - 1], m - f)
    return blend(v[i], v[min(i + 1, m)], f - i)


def bezier(v: Sequence[Any], k: float) -> Any:
    """Bezier curve of degree len(v) - 1 using the control points as weights."""
    n = len(v) - 1
    b = 0
    for i in range(n + 1):
        b = b + pow(1 - k, n - i) * pow(k, i) * v[i] * bernstein(n, i)
    return b


def _is_closed(v: Sequence[Any]) -> bool:
    return bool(np.array_equal(v[0], v[-1]))


def catmull_rom(v: Sequence[Any], k: float) -> Any:
    """Catmull-Rom spline through every control point.

    A path whose first and last points are equal is treated as a closed
    loop: indices wrap and negative positions are phase-shifted. An open
    path extrapolates by reflecting the curve through its end points.
    """
    m = len(v) - 1
    if m == 0:
        return v[0]

    f = m * k
    i = math.floor(f)

    if _is_closed(v):
        if k < 0:
            f = m * (1 + k)
            i = math.floor(f)
        return catmull_rom_segment(
            v[(i - 1) % m], v[i % m], v[(i + 1) % m], v[(i + 2) % m], f - i
        )

    if k < 0:
        return v[0] - (catmull_rom_segment(v[0], v[0], v[1], v[1], -f) - v[0])
    if k > 1:
        return v[m] - (catmull_rom_segment(v[m], v[m], v[m - 1], v[m - 1], f - m) - v[m])
    return catmull_rom_segment(
        v[i - 1 if i else 0],
        v[i],
        v[min(i + 1, m)],
        v[min(i + 2, m)],
        f - i,
    )


class Interpolation(Enum):
    """Available interpolation functions."""

    LINEAR = "linear"
    BEZIER = "bezier"
    CATMULL_ROM = "catmull_rom"


_INTERPOLATION_FUNCTIONS: dict[Interpolation, InterpolationFunc] = {
    Interpolation.LINEAR: linear,
    Interpolation.BEZIER: bezier,
    Interpolation.CATMULL_ROM: catmull_rom,
}

# Accept the camel-case family names as well
_INTERPOLATION_ALIASES: dict[str, Interpolation] = {
    "catmullrom": Interpolation.CATMULL_ROM,
}


def get_interpolation(interpolation: Interpolation | str) -> InterpolationFunc:
    """Get an interpolation function by enum or name.

    Args:
        interpolation: Interpolation enum value or name ("bezier",
            "catmull_rom", "CatmullRom")

    Returns:
        The interpolation function

    Raises:
        ValueError: If interpolation name is not recognized
    """
    if isinstance(interpolation, str):
        name = interpolation.lower()
        resolved = _INTERPOLATION_ALIASES.get(name)
        if resolved is None:
            try:
                resolved = Interpolation(name)
            except ValueError:
                raise ValueError(f"Unknown interpolation function: {interpolation}") from None
        interpolation = resolved

    return _INTERPOLATION_FUNCTIONS[interpolation]
