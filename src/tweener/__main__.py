"""
Demo runner for tweener.

Drives one tween preset at a fixed time step through a group and logs the
animated values every tick, the way a host frame loop would.

    python -m tweener --name slide --step 50 --debug
"""

from pathlib import Path
import argparse
import logging
import sys

from tweener.config import TweenPreset, get_settings, load_presets, setup_logging
from tweener.group import GroupRegistry

logger = logging.getLogger("tweener.demo")

# Upper bound on ticks so a preset that repeats forever still exits
MAX_TICKS = 10_000

DEFAULT_TARGET = {"x": 0.0, "y": 0.0, "alpha": 0.0, "scale": 1.0}


def run_preset(preset: TweenPreset, step: float) -> dict:
    """Play preset on a fresh target until its group completes.

    Returns:
        The target with its final values
    """
    target = dict(DEFAULT_TARGET)
    registry = GroupRegistry()
    group = registry.get_group_with_tag(f"demo.{preset.name}")

    tween = preset.build(target, group=group)
    tween.on_repeat(lambda obj: logger.info(f"repeat: {_format(obj)}"))
    tween.on_complete(lambda obj: logger.info(f"complete: {_format(obj)}"))
    tween.start()

    ticks = 0
    while not group.is_completed() and ticks < MAX_TICKS:
        group.update(step)
        ticks += 1
        logger.debug(f"t={ticks * step:>7.1f} ratio={tween.ratio:.3f} {_format(target)}")

    if not group.is_completed():
        logger.warning(f"Preset {preset.name!r} still playing after {ticks} ticks, stopping")
        tween.stop()

    return target


def _format(values: dict) -> str:
    return " ".join(f"{name}={value:.3f}" for name, value in values.items())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play a tween preset and log its values")
    parser.add_argument("--preset", default="demo", help="preset file name (without .yaml)")
    parser.add_argument("--path", type=Path, default=None, help="directory of preset files")
    parser.add_argument("--name", default=None, help="preset to play (default: all)")
    parser.add_argument("--step", type=float, default=16.0, help="time step per tick in ms")
    parser.add_argument("--debug", action="store_true", help="log every tick")
    args = parser.parse_args(argv)

    setup_logging(args.debug or get_settings().debug)

    presets = load_presets(args.preset, args.path)
    if not presets:
        logger.error(f"No presets found in {args.preset!r}")
        return 1

    if args.name is not None:
        if args.name not in presets:
            logger.error(f"Unknown preset {args.name!r}; available: {', '.join(presets)}")
            return 1
        presets = {args.name: presets[args.name]}

    for preset in presets.values():
        logger.info(f"Playing {preset.name} ({preset.duration:g} ms, {preset.easing})")
        final = run_preset(preset, args.step)
        logger.info(f"Finished {preset.name}: {_format(final)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
