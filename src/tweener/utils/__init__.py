"""Utility modules for tweener."""

from .sequences import remove_if

__all__ = [
    "remove_if",
]
