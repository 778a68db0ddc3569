"""
Named tween presets and YAML loading utilities.

A preset file maps preset names to tween settings:

    fade_in:
      duration: 500
      easing: Cubic.Out
      to:
        alpha: 1.0
    pulse:
      duration: 800
      repeat: infinite
      yoyo: true
      to:
        scale: "+0.2"
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional
import logging
import math

import yaml

from tweener.config.settings import get_settings

if TYPE_CHECKING:
    from tweener.group import TweenGroup
    from tweener.tween import Tween

logger = logging.getLogger(__name__)


def _parse_repeat(value: Any) -> float:
    if isinstance(value, str) and value.lower() in ("infinite", "inf", "forever"):
        return math.inf
    return value


@dataclass
class TweenPreset:
    """Reusable tween configuration."""
    name: str = "default"
    duration: float = 1000.0  # milliseconds
    delay: float = 0.0
    repeat: float = 0
    repeat_delay: Optional[float] = None
    yoyo: bool = False
    easing: str = "linear"
    interpolation: str = "linear"
    to: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, name: str, data: dict[str, Any]) -> "TweenPreset":
        """Create a preset from YAML data.

        Raises:
            ValueError: If data contains keys that are not preset settings
        """
        known = {f.name for f in fields(cls)} - {"name"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown preset settings for {name!r}: {sorted(unknown)}")

        values = dict(data)
        if "repeat" in values:
            values["repeat"] = _parse_repeat(values["repeat"])
        return cls(name=name, **values)

    def build(
        self,
        target: Any,
        group: Optional["TweenGroup"] = None,
    ) -> "Tween":
        """Create an unstarted tween for target configured from this preset."""
        from tweener.tween import Tween

        return (
            Tween(self.duration, group=group)
            .from_(target)
            .to(self.to)
            .delay(self.delay)
            .repeat(self.repeat)
            .repeat_delay(self.repeat_delay)
            .yoyo(self.yoyo)
            .easing(self.easing)
            .interpolation(self.interpolation)
        )


def load_presets(preset_file: str, presets_path: Path | None = None) -> dict[str, TweenPreset]:
    """
    Load presets from a YAML file.

    Args:
        preset_file: Name of the file (without .yaml extension)
        presets_path: Directory holding preset files

    Returns:
        Presets by name; empty if the file does not exist
    """
    if presets_path is None:
        presets_path = get_settings().presets_path

    path = presets_path / f"{preset_file}.yaml"

    if not path.exists():
        logger.debug(f"No preset file at {path}")
        return {}

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return {name: TweenPreset.from_yaml(name, values or {}) for name, values in data.items()}


def list_presets(presets_path: Path | None = None) -> list[str]:
    """List available preset files."""
    if presets_path is None:
        presets_path = get_settings().presets_path

    return sorted(f.stem for f in presets_path.glob("*.yaml"))
