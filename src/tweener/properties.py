"""Property access on tween targets and the end values a tween drives them to.

A tween target is either a mutable mapping (``{"x": 0}``) or any object
with attributes. ``PropertyAccessor`` hides the difference. End values are
parsed once into one of four variants so the per-tick code only has to
dispatch on type.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Union
import numbers

import numpy as np
from numpy.typing import NDArray


class _Missing:
    """Marker for a property the target does not have."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

Numeric = Union[float, NDArray[np.float64]]


class PropertyAccessor:
    """Reads and writes named properties on a tween target."""

    def __init__(self, target: Any):
        self.target = target
        self._is_mapping = isinstance(target, MutableMapping)

    def get(self, name: str) -> Any:
        """Get a property value, or MISSING if the target lacks it."""
        if self._is_mapping:
            return self.target.get(name, MISSING)
        return getattr(self.target, name, MISSING)

    def set(self, name: str, value: Any) -> None:
        if self._is_mapping:
            self.target[name] = value
        else:
            setattr(self.target, name, value)

    def has(self, name: str) -> bool:
        return self.get(name) is not MISSING


def coerce_number(value: Any) -> Numeric:
    """Coerce a captured value to a float, or a float array for sequences.

    Values that cannot be read as numbers become NaN rather than raising.
    """
    if isinstance(value, (np.ndarray, list, tuple)):
        try:
            return np.array(value, dtype=float)
        except (TypeError, ValueError):
            return np.full(len(value), np.nan)
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def _as_point(value: Any) -> Any:
    if isinstance(value, (np.ndarray, list, tuple)):
        return np.asarray(value, dtype=float)
    return value


@dataclass(frozen=True)
class AbsoluteValue:
    """A fixed number (or array) to tween towards."""

    value: Numeric

    def resolve(self, start: Numeric) -> Numeric:
        return self.value


@dataclass(frozen=True)
class RelativeDelta:
    """An offset from the captured start value, written as "+10" or "-3"."""

    delta: float

    def resolve(self, start: Numeric) -> Numeric:
        return start + self.delta


@dataclass(frozen=True)
class ControlPoints:
    """Waypoints for path interpolation. The start value is prepended at start()."""

    points: tuple

    def __len__(self) -> int:
        return len(self.points)

    def with_origin(self, origin: Any) -> "ControlPoints":
        """Return a copy with origin as the first control point."""
        return ControlPoints((_as_point(origin),) + self.points)


@dataclass(frozen=True)
class UnusableValue:
    """An end value that is not numeric; the property is left untouched."""

    raw: Any


EndValue = Union[AbsoluteValue, RelativeDelta, ControlPoints, UnusableValue]


def parse_end_value(raw: Any) -> EndValue:
    """Classify a raw end value.

    Args:
        raw: Number, numeric string, relative string ("+10", "-3"),
            sequence of control points or numpy array

    Returns:
        The matching end value variant. Never raises.
    """
    if isinstance(raw, np.ndarray):
        return AbsoluteValue(np.asarray(raw, dtype=float))

    if isinstance(raw, (list, tuple)):
        return ControlPoints(tuple(_as_point(p) for p in raw))

    if isinstance(raw, bool):
        return UnusableValue(raw)

    if isinstance(raw, numbers.Real):
        return AbsoluteValue(float(raw))

    if isinstance(raw, str):
        text = raw.strip()
        try:
            number = float(text)
        except ValueError:
            return UnusableValue(raw)
        if text[:1] in ("+", "-"):
            return RelativeDelta(number)
        return AbsoluteValue(number)

    return UnusableValue(raw)
