"""Shared fixtures for tweener tests."""

import pytest

from tweener.config.settings import get_settings
from tweener.group import GroupRegistry, reset_registry


@pytest.fixture(autouse=True)
def fresh_registry():
    """Give every test its own module-level group registry."""
    return reset_registry()


@pytest.fixture
def registry():
    """A standalone registry, independent of the module-level one."""
    return GroupRegistry(default_tag="test.default")


@pytest.fixture
def settings_env(monkeypatch):
    """Set TWEENER_* variables for one test and reload settings."""

    def _set(**values):
        for name, value in values.items():
            monkeypatch.setenv(f"TWEENER_{name.upper()}", str(value))
        get_settings.cache_clear()
        return get_settings()

    yield _set
    get_settings.cache_clear()
