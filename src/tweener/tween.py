"""Tween: one animation of a target's properties over time.

A tween is configured fluently, then started, then advanced by the host
with ``update(delta_ms)`` (usually through its group). Properties are
written straight onto the target object.

Example:
    pos = {"x": 0.0, "y": 0.0}
    Tween(1000).from_(pos).to({"x": 100, "y": "+20"}).easing("Quadratic.Out").start()
    get_default_group().update(16)
"""

from enum import Enum, auto
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
import itertools
import logging
import math

from tweener.config.settings import get_settings
from tweener.easing import Easing, EasingFunc, get_easing
from tweener.group import GroupRegistry, TweenGroup, get_registry
from tweener.interpolation import Interpolation, InterpolationFunc, get_interpolation
from tweener.properties import (
    MISSING,
    ControlPoints,
    EndValue,
    PropertyAccessor,
    UnusableValue,
    coerce_number,
    parse_end_value,
)

logger = logging.getLogger(__name__)

TargetCallback = Callable[[Any], None]
UpdateCallback = Callable[[float, Any], None]


class TweenState(Enum):
    """Tween lifecycle state."""

    UNSTARTED = auto()
    PLAYING = auto()
    COMPLETED = auto()
    STOPPED = auto()


class Tween:
    """Animates numeric properties of a target towards end values.

    Every configuration method returns the tween so calls can be chained.
    Configuring a tween after start() is allowed but its effect on the
    running animation is undefined.

    Timing is in whatever unit the host passes to update(); milliseconds
    by convention.
    """

    _ids = itertools.count()

    # Factory methods
    @classmethod
    def create(cls, duration: float) -> "Tween":
        return cls(duration)

    @classmethod
    def create_with_tag(cls, duration: float, tag: str) -> "Tween":
        """Create a tween in the group registered under tag."""
        return cls(duration, tag=tag)

    @classmethod
    def create_with_group(cls, duration: float, group: TweenGroup) -> "Tween":
        return cls(duration, group=group)

    def __init__(
        self,
        duration: Optional[float] = None,
        group: Optional[TweenGroup] = None,
        *,
        tag: Optional[str] = None,
        registry: Optional[GroupRegistry] = None,
    ):
        settings = get_settings()

        self._object: Any = None
        self._accessor: Optional[PropertyAccessor] = None
        self._ratio = 0.0
        self._values_start: Dict[str, Any] = {}
        self._values_end: Dict[str, EndValue] = {}
        self._active_end: Dict[str, EndValue] = {}

        self._delay_time = 0.0
        self._elapsed = 0.0
        self._delay_to_start = 0.0
        self._duration = settings.default_duration if duration is None else duration

        self._repeat: float = 0
        self._repeat_delay_time: Optional[float] = None
        self._yoyo = False

        self._is_paused = False
        self._is_playing = False
        self._reversed = False
        self._state = TweenState.UNSTARTED

        self._easing_function: EasingFunc = get_easing(settings.default_easing)
        self._interpolation_function: InterpolationFunc = get_interpolation(
            settings.default_interpolation
        )

        self._chained_tweens: Tuple["Tween", ...] = ()

        self._on_start_callback_fired = False
        self._on_start_callback: Optional[TargetCallback] = None
        self._on_update_callback: Optional[UpdateCallback] = None
        self._on_repeat_callback: Optional[TargetCallback] = None
        self._on_complete_callback: Optional[TargetCallback] = None
        self._on_stop_callback: Optional[TargetCallback] = None

        if group is None:
            registry = registry or get_registry()
            group = registry.get_group_with_tag(tag) if tag else registry.get_default_group()
        self._group = group
        self._id = next(Tween._ids)

    def __repr__(self) -> str:
        return f"Tween(id={self._id}, state={self._state.name}, ratio={self._ratio:.3f})"

    # Read accessors
    @property
    def id(self) -> int:
        return self._id

    @property
    def target(self) -> Any:
        """The object whose properties are animated."""
        return self._object

    @property
    def ratio(self) -> float:
        """Elapsed time over duration, before easing. May exceed 1."""
        return self._ratio

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    @property
    def is_reversed(self) -> bool:
        return self._reversed

    @property
    def state(self) -> TweenState:
        return self._state

    @property
    def chained_tweens(self) -> Tuple["Tween", ...]:
        return self._chained_tweens

    def get_group(self) -> TweenGroup:
        return self._group

    def get_start_value(self, name: str) -> Any:
        """Get the captured start value of a property, or MISSING."""
        return self._values_start.get(name, MISSING)

    def get_control_points(self, name: str) -> Optional[tuple]:
        """Get the path a property follows since the last start(), if any.

        The first point is the value the property had when the tween started.
        """
        end = self._active_end.get(name)
        if isinstance(end, ControlPoints):
            return end.points
        return None

    # Configuration
    def from_(self, target: Any) -> "Tween":
        """Set the target object; its current values are the start values.

        Args:
            target: Mutable mapping or object with attributes

        Returns:
            Self for method chaining
        """
        self._object = target
        self._accessor = PropertyAccessor(target)
        self._values_start = {}
        return self

    from_values = from_

    def to(self, properties: Mapping[str, Any]) -> "Tween":
        """Set the end values.

        Args:
            properties: Property name to a number, a numeric string, a
                relative string ("+10", "-3"), a list of control points
                or a numpy array

        Returns:
            Self for method chaining
        """
        self._values_end = {name: parse_end_value(raw) for name, raw in properties.items()}
        return self

    def duration(self, duration: float) -> "Tween":
        self._duration = duration
        return self

    def delay(self, amount: float) -> "Tween":
        """Wait this long after start() before progressing."""
        self._delay_time = amount
        return self

    def repeat(self, times: float) -> "Tween":
        """Repeat this many extra times; math.inf repeats forever."""
        self._repeat = times
        return self

    def repeat_delay(self, amount: Optional[float]) -> "Tween":
        """Delay before each repeat; None falls back to delay()."""
        self._repeat_delay_time = amount
        return self

    def yoyo(self, yoyo: bool = True) -> "Tween":
        """Reverse direction on every repeat."""
        self._yoyo = yoyo
        return self

    def easing(self, easing: EasingFunc | Easing | str) -> "Tween":
        if not callable(easing):
            easing = get_easing(easing)
        self._easing_function = easing
        return self

    def interpolation(self, interpolation: InterpolationFunc | Interpolation | str) -> "Tween":
        if not callable(interpolation):
            interpolation = get_interpolation(interpolation)
        self._interpolation_function = interpolation
        return self

    def chain(self, *tweens: "Tween") -> "Tween":
        """Start these tweens when this one completes; replaces any previous chain."""
        self._chained_tweens = tweens
        return self

    def group(self, group: TweenGroup) -> "Tween":
        self._group = group
        return self

    # Callbacks
    def on_start(self, callback: Optional[TargetCallback]) -> "Tween":
        self._on_start_callback = callback
        return self

    def on_update(self, callback: Optional[UpdateCallback]) -> "Tween":
        """Called every playing tick with (delta_time, target)."""
        self._on_update_callback = callback
        return self

    def on_repeat(self, callback: Optional[TargetCallback]) -> "Tween":
        self._on_repeat_callback = callback
        return self

    def on_complete(self, callback: Optional[TargetCallback]) -> "Tween":
        self._on_complete_callback = callback
        return self

    def on_stop(self, callback: Optional[TargetCallback]) -> "Tween":
        self._on_stop_callback = callback
        return self

    def on_group_completed(self, callback: Callable[[], None]) -> "Tween":
        """Set the owning group's completion callback unless one is already set."""
        if self._group.completion_callback is None:
            self._group.on_complete(callback)
        return self

    # Lifecycle
    def start(self) -> "Tween":
        """Join the group, reset playback and capture start values.

        A start value already captured by an earlier start() is kept.
        Properties the target does not have are skipped.

        Returns:
            Self for method chaining
        """
        self._group.add(self)

        self._is_playing = True
        self._is_paused = False
        self._reversed = False
        self._on_start_callback_fired = False
        self._elapsed = 0.0
        self._delay_to_start = self._delay_time
        self._state = TweenState.PLAYING

        self._active_end = {}
        accessor = self._accessor
        for name, end in self._values_end.items():
            if isinstance(end, ControlPoints) and len(end) == 0:
                continue

            if accessor is None or not accessor.has(name):
                logger.debug(f"Tween {self._id}: target has no property {name!r}, skipping")
                continue
            current = accessor.get(name)

            if isinstance(end, ControlPoints):
                end = end.with_origin(coerce_number(current))
            elif isinstance(end, UnusableValue):
                logger.debug(f"Tween {self._id}: end value {end.raw!r} for {name!r} is not numeric")
            self._active_end[name] = end

            if name not in self._values_start:
                self._values_start[name] = coerce_number(current)

        logger.debug(f"Tween started: {self._id} ({len(self._active_end)} properties)")
        return self

    def update(self, delta_time: float) -> None:
        """Advance the tween by delta_time and write the new values.

        Args:
            delta_time: Time elapsed since the previous update
        """
        if not self._is_playing:
            return

        self._delay_to_start -= delta_time
        if self._delay_to_start > 0:
            return

        if not self._on_start_callback_fired:
            if self._on_start_callback is not None:
                self._on_start_callback(self._object)
            self._on_start_callback_fired = True

        self._elapsed += delta_time
        if self._duration > 0:
            self._ratio = self._elapsed / self._duration
        else:
            # Zero or negative duration finishes on the first tick with time in it
            self._ratio = math.inf if self._elapsed > 0 else 0.0

        # end() and zero-length tweens produce an infinite ratio
        progress = self._ratio if math.isfinite(self._ratio) else 1.0
        if self._reversed:
            progress = 1 - progress
        value = self._easing_function(progress)

        self._apply(value)

        if self._on_update_callback is not None:
            self._on_update_callback(delta_time, self._object)

        if self._ratio < 1:
            return

        if self._repeat > 0:
            self._elapsed = 0.0
            if math.isfinite(self._repeat):
                self._repeat -= 1
            if self._yoyo:
                self._reversed = not self._reversed

            if self._repeat_delay_time is not None:
                self._delay_to_start = self._repeat_delay_time
            else:
                self._delay_to_start = self._delay_time

            logger.debug(f"Tween repeating: {self._id} (remaining={self._repeat})")
            if self._on_repeat_callback is not None:
                self._on_repeat_callback(self._object)
            return

        if self._on_complete_callback is not None:
            self._on_complete_callback(self._object)

        self._is_playing = False
        self._state = TweenState.COMPLETED
        logger.debug(f"Tween completed: {self._id}")

        for tween in self._chained_tweens:
            tween.start()

    def _apply(self, value: float) -> None:
        for name, end in self._active_end.items():
            if name not in self._values_start:
                continue

            if isinstance(end, ControlPoints):
                self._accessor.set(name, self._interpolation_function(end.points, value))
                continue

            if isinstance(end, UnusableValue):
                continue

            start = self._values_start[name]
            self._accessor.set(name, start + (end.resolve(start) - start) * value)

    def stop(self) -> "Tween":
        """Stop playback, leave the group and stop every chained tween."""
        if not self._is_playing:
            return self

        self._group.remove(self)

        self._is_playing = False
        self._is_paused = False
        self._state = TweenState.STOPPED
        logger.debug(f"Tween stopped: {self._id}")

        if self._on_stop_callback is not None:
            self._on_stop_callback(self._object)

        self.stop_chained_tweens()
        return self

    def stop_chained_tweens(self) -> None:
        for tween in self._chained_tweens:
            tween.stop()

    def end(self) -> "Tween":
        """Jump to the end in a single update.

        Only the current cycle is finished: a tween with repeats left
        starts its next cycle instead, so with ``repeat(math.inf)`` no
        number of end() calls will complete it.
        """
        self.update(math.inf)
        return self
