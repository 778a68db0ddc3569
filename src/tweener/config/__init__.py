"""Configuration for tweener: settings, logging setup and presets."""

from .settings import TweenerSettings, get_settings, setup_logging
from .presets import TweenPreset, load_presets, list_presets

__all__ = [
    "TweenerSettings",
    "get_settings",
    "setup_logging",
    "TweenPreset",
    "load_presets",
    "list_presets",
]
