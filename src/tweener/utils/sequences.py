"""Helpers for ordered sequences."""

from typing import Callable, MutableSequence, TypeVar

T = TypeVar("T")


def remove_if(items: MutableSequence[T], predicate: Callable[[T], bool]) -> bool:
    """Remove the first element matching predicate, in place.

    Args:
        items: Sequence to modify
        predicate: Test applied to each element in order

    Returns:
        True if an element was removed
    """
    for index, item in enumerate(items):
        if predicate(item):
            del items[index]
            return True
    return False
