"""Easing functions for tween progress.

Every function maps a normalized progress value k (nominally 0.0 to 1.0)
to an eased progress value. Inputs are never clamped: a tween that
overshoots its duration may pass values slightly outside the range.
"""

from enum import Enum
from typing import Callable, Optional
import math
import random


# Type alias for easing functions
EasingFunc = Callable[[float], float]


def linear(k: float) -> float:
    """No easing."""
    return k


# Quadratic
def quadratic_in(k: float) -> float:
    """Accelerate from zero velocity."""
    return k * k


def quadratic_out(k: float) -> float:
    """Decelerate to zero velocity."""
    return k * (2 - k)


def quadratic_in_out(k: float) -> float:
    """Accelerate then decelerate."""
    k *= 2
    if k < 1:
        return 0.5 * k * k
    k -= 1
    return -0.5 * (k * (k - 2) - 1)


# Cubic
def cubic_in(k: float) -> float:
    return k * k * k


def cubic_out(k: float) -> float:
    k -= 1
    return k * k * k + 1


def cubic_in_out(k: float) -> float:
    k *= 2
    if k < 1:
        return 0.5 * k * k * k
    k -= 2
    return 0.5 * (k * k * k + 2)


# Quartic
def quartic_in(k: float) -> float:
    return k * k * k * k


def quartic_out(k: float) -> float:
    k -= 1
    return 1 - k * k * k * k


def quartic_in_out(k: float) -> float:
    k *= 2
    if k < 1:
        return 0.5 * k * k * k * k
    k -= 2
    return -0.5 * (k * k * k * k - 2)


# Quintic
def quintic_in(k: float) -> float:
    return k * k * k * k * k


def quintic_out(k: float) -> float:
    k -= 1
    return k * k * k * k * k + 1


def quintic_in_out(k: float) -> float:
    k *= 2
    if k < 1:
        return 0.5 * k * k * k * k * k
    k -= 2
    return 0.5 * (k * k * k * k * k + 2)


# Sinusoidal
def sinusoidal_in(k: float) -> float:
    """Accelerate using a quarter cosine wave."""
    return 1 - math.cos(k * math.pi / 2)


def sinusoidal_out(k: float) -> float:
    """Decelerate using a quarter sine wave."""
    return math.sin(k * math.pi / 2)


def sinusoidal_in_out(k: float) -> float:
    """Accelerate then decelerate using half a cosine wave."""
    return 0.5 * (1 - math.cos(math.pi * k))


# Exponential (endpoints are exact)
def exponential_in(k: float) -> float:
    """Accelerate exponentially."""
    return 0 if k == 0 else pow(1024, k - 1)


def exponential_out(k: float) -> float:
    """Decelerate exponentially."""
    return 1 if k == 1 else 1 - pow(2, -10 * k)


def exponential_in_out(k: float) -> float:
    """Accelerate then decelerate exponentially."""
    if k == 0:
        return 0
    if k == 1:
        return 1
    k *= 2
    if k < 1:
        return 0.5 * pow(1024, k - 1)
    return 0.5 * (-pow(2, -10 * (k - 1)) + 2)


# Circular (NaN outside the unit circle)
def _root(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def circular_in(k: float) -> float:
    return 1 - _root(1 - k * k)


def circular_out(k: float) -> float:
    k -= 1
    return _root(1 - k * k)


def circular_in_out(k: float) -> float:
    k *= 2
    if k < 1:
        return -0.5 * (_root(1 - k * k) - 1)
    k -= 2
    return 0.5 * (_root(1 - k * k) + 1)


# Elastic (amplitude 1, period 0.4; endpoints are exact)
def elastic_in(k: float) -> float:
    """Accelerate with an elastic wind-up."""
    if k == 0:
        return 0
    if k == 1:
        return 1
    return -pow(2, 10 * (k - 1)) * math.sin((k - 1.1) * 5 * math.pi)


def elastic_out(k: float) -> float:
    """Decelerate with an elastic overshoot."""
    if k == 0:
        return 0
    if k == 1:
        return 1
    return pow(2, -10 * k) * math.sin((k - 0.1) * 5 * math.pi) + 1


def elastic_in_out(k: float) -> float:
    """Elastic wind-up followed by an elastic overshoot."""
    if k == 0:
        return 0
    if k == 1:
        return 1
    k *= 2
    if k < 1:
        return -0.5 * pow(2, 10 * (k - 1)) * math.sin((k - 1.1) * 5 * math.pi)
    return 0.5 * pow(2, -10 * (k - 1)) * math.sin((k - 1.1) * 5 * math.pi) + 1


# Back (overshoot)
BACK_OVERSHOOT = 1.70158


def back_in(k: float) -> float:
    """Pull back slightly before accelerating."""
    s = BACK_OVERSHOOT
    return k * k * ((s + 1) * k - s)


def back_out(k: float) -> float:
    """Overshoot the target slightly before settling."""
    s = BACK_OVERSHOOT
    k -= 1
    return k * k * ((s + 1) * k + s) + 1


def back_in_out(k: float) -> float:
    """Pull back, then overshoot."""
    s = BACK_OVERSHOOT * 1.525
    k *= 2
    if k < 1:
        return 0.5 * (k * k * ((s + 1) * k - s))
    k -= 2
    return 0.5 * (k * k * ((s + 1) * k + s) + 2)


# Bounce
def bounce_out(k: float) -> float:
    """Decelerate with a bounce effect."""
    if k < 1 / 2.75:
        return 7.5625 * k * k
    elif k < 2 / 2.75:
        k -= 1.5 / 2.75
        return 7.5625 * k * k + 0.75
    elif k < 2.5 / 2.75:
        k -= 2.25 / 2.75
        return 7.5625 * k * k + 0.9375
    else:
        k -= 2.625 / 2.75
        return 7.5625 * k * k + 0.984375


def bounce_in(k: float) -> float:
    """Accelerate with a bounce effect."""
    return 1 - bounce_out(1 - k)


def bounce_in_out(k: float) -> float:
    if k < 0.5:
        return bounce_in(k * 2) * 0.5
    return bounce_out(k * 2 - 1) * 0.5 + 0.5


# Family name -> variant name -> function
EASING_FAMILIES: dict[str, dict[str, EasingFunc]] = {
    "Linear": {"None": linear},
    "Quadratic": {"In": quadratic_in, "Out": quadratic_out, "InOut": quadratic_in_out},
    "Cubic": {"In": cubic_in, "Out": cubic_out, "InOut": cubic_in_out},
    "Quartic": {"In": quartic_in, "Out": quartic_out, "InOut": quartic_in_out},
    "Quintic": {"In": quintic_in, "Out": quintic_out, "InOut": quintic_in_out},
    "Sinusoidal": {"In": sinusoidal_in, "Out": sinusoidal_out, "InOut": sinusoidal_in_out},
    "Exponential": {"In": exponential_in, "Out": exponential_out, "InOut": exponential_in_out},
    "Circular": {"In": circular_in, "Out": circular_out, "InOut": circular_in_out},
    "Elastic": {"In": elastic_in, "Out": elastic_out, "InOut": elastic_in_out},
    "Back": {"In": back_in, "Out": back_out, "InOut": back_in_out},
    "Bounce": {"In": bounce_in, "Out": bounce_out, "InOut": bounce_in_out},
}


class Easing(Enum):
    """Available easing functions, valued by their function name."""

    LINEAR = "linear"

    QUADRATIC_IN = "quadratic_in"
    QUADRATIC_OUT = "quadratic_out"
    QUADRATIC_IN_OUT = "quadratic_in_out"

    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    CUBIC_IN_OUT = "cubic_in_out"

    QUARTIC_IN = "quartic_in"
    QUARTIC_OUT = "quartic_out"
    QUARTIC_IN_OUT = "quartic_in_out"

    QUINTIC_IN = "quintic_in"
    QUINTIC_OUT = "quintic_out"
    QUINTIC_IN_OUT = "quintic_in_out"

    SINUSOIDAL_IN = "sinusoidal_in"
    SINUSOIDAL_OUT = "sinusoidal_out"
    SINUSOIDAL_IN_OUT = "sinusoidal_in_out"

    EXPONENTIAL_IN = "exponential_in"
    EXPONENTIAL_OUT = "exponential_out"
    EXPONENTIAL_IN_OUT = "exponential_in_out"

    CIRCULAR_IN = "circular_in"
    CIRCULAR_OUT = "circular_out"
    CIRCULAR_IN_OUT = "circular_in_out"

    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    ELASTIC_IN_OUT = "elastic_in_out"

    BACK_IN = "back_in"
    BACK_OUT = "back_out"
    BACK_IN_OUT = "back_in_out"

    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    BOUNCE_IN_OUT = "bounce_in_out"


_VARIANT_SUFFIX = {"None": "", "In": "_in", "Out": "_out", "InOut": "_in_out"}

# "quadratic_in" and "Quadratic.In" both resolve to the same function
_EASING_BY_NAME: dict[str, EasingFunc] = {}
for _family, _variants in EASING_FAMILIES.items():
    for _variant, _func in _variants.items():
        _EASING_BY_NAME[_func.__name__] = _func
        _EASING_BY_NAME[f"{_family}.{_variant}".lower()] = _func
del _family, _variants, _variant, _func


def get_easing(easing: Easing | str) -> EasingFunc:
    """Get an easing function by enum or name.

    Args:
        easing: Easing enum value, a function name ("cubic_out") or a
            family-qualified name ("Cubic.Out")

    Returns:
        The easing function

    Raises:
        ValueError: If easing name is not recognized
    """
    name = easing.value if isinstance(easing, Easing) else str(easing)
    func = _EASING_BY_NAME.get(name.lower())
    if func is None:
        raise ValueError(f"Unknown easing function: {easing}")
    return func


def get_random_easing_family(rng: Optional[random.Random] = None) -> dict[str, EasingFunc]:
    """Pick one easing family uniformly at random."""
    rng = rng or random
    return EASING_FAMILIES[rng.choice(list(EASING_FAMILIES))]


def get_random_easing_variant(
    family: dict[str, EasingFunc],
    rng: Optional[random.Random] = None,
) -> EasingFunc:
    """Pick one variant of an easing family uniformly at random."""
    rng = rng or random
    return family[rng.choice(list(family))]


def get_random_easing(rng: Optional[random.Random] = None) -> EasingFunc:
    """Pick a random family, then a random variant within it.

    Args:
        rng: Optional random generator for reproducible picks

    Returns:
        The chosen easing function
    """
    family = get_random_easing_family(rng)
    return get_random_easing_variant(family, rng)
