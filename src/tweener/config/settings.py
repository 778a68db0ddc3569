"""
Library settings using Pydantic.

Settings are loaded from environment variables (prefix ``TWEENER_``) with
.env file support.
"""

from functools import lru_cache
from pathlib import Path
import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TweenerSettings(BaseSettings):
    """Defaults applied to newly created tweens and groups."""

    model_config = SettingsConfigDict(
        env_prefix="TWEENER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Behaviour of a freshly constructed Tween
    default_easing: str = "linear"
    default_interpolation: str = "linear"
    default_duration: float = Field(default=1000.0, description="milliseconds")

    # Reserved registry key of the default group
    default_group_tag: str = Field(default="tweener.default", min_length=1)

    # Preset files
    presets_path: Path = Field(default_factory=lambda: Path(__file__).parent / "presets")


@lru_cache
def get_settings() -> TweenerSettings:
    """Get cached settings instance."""
    return TweenerSettings()


def setup_logging(debug: bool = False) -> None:
    """Configure logging for scripts driving tweens."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
