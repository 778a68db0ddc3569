"""tweener - time-driven property animation with easing, paths and groups."""

from tweener.easing import (
    Easing,
    EasingFunc,
    EASING_FAMILIES,
    get_easing,
    get_random_easing,
    get_random_easing_family,
    get_random_easing_variant,
)
from tweener.interpolation import Interpolation, InterpolationFunc, get_interpolation
from tweener.group import (
    TweenGroup,
    GroupRegistry,
    get_registry,
    reset_registry,
    get_group_with_tag,
    get_default_group,
)
from tweener.tween import Tween, TweenState
from tweener.properties import MISSING
from tweener.config import TweenerSettings, TweenPreset, get_settings, load_presets, list_presets

__all__ = [
    # Easing
    "Easing",
    "EasingFunc",
    "EASING_FAMILIES",
    "get_easing",
    "get_random_easing",
    "get_random_easing_family",
    "get_random_easing_variant",
    # Interpolation
    "Interpolation",
    "InterpolationFunc",
    "get_interpolation",
    # Groups
    "TweenGroup",
    "GroupRegistry",
    "get_registry",
    "reset_registry",
    "get_group_with_tag",
    "get_default_group",
    # Tween
    "Tween",
    "TweenState",
    "MISSING",
    # Configuration
    "TweenerSettings",
    "TweenPreset",
    "get_settings",
    "load_presets",
    "list_presets",
]
