"""Tween groups and the registry that looks them up by tag."""

from typing import TYPE_CHECKING, Callable, Dict, List, Optional
import logging

from tweener.config.settings import get_settings
from tweener.utils.sequences import remove_if

if TYPE_CHECKING:
    from tweener.tween import Tween

logger = logging.getLogger(__name__)


class TweenGroup:
    """A set of tweens advanced together.

    The group completes once it has been started (a tween was added) and
    an update pass finds no member still playing. On completion the member
    list is cleared, the completion callback fires once, and a group with
    ``remove_on_completion`` removes itself from its registry.
    """

    def __init__(
        self,
        tag: str,
        registry: Optional["GroupRegistry"] = None,
        remove_on_completion: bool = True,
    ):
        self.tag = tag
        self.registry = registry
        self.remove_on_completion = remove_on_completion

        self._tweens: List["Tween"] = []
        self._on_complete_callback: Optional[Callable[[], None]] = None
        self._started = False
        self._completed = False

    def __repr__(self) -> str:
        return f"TweenGroup(tag={self.tag!r}, tweens={len(self._tweens)})"

    def on_complete(self, callback: Optional[Callable[[], None]]) -> "TweenGroup":
        """Set the callback fired when the group completes."""
        self._on_complete_callback = callback
        return self

    @property
    def completion_callback(self) -> Optional[Callable[[], None]]:
        return self._on_complete_callback

    @property
    def is_started(self) -> bool:
        return self._started

    def is_completed(self) -> bool:
        return self._completed

    def get_all(self) -> List["Tween"]:
        """Get the live member list."""
        return self._tweens

    def remove_all(self) -> None:
        self._tweens = []

    def add(self, tween: "Tween") -> None:
        self._tweens.append(tween)
        self._started = True
        self._completed = False

    def remove(self, tween: "Tween") -> bool:
        """Remove the first member with the same id as tween.

        Returns:
            True if a member was removed
        """
        return remove_if(self._tweens, lambda t: t.id == tween.id)

    def update(self, delta_time: float) -> None:
        """Advance every playing member by delta_time.

        Members are visited in insertion order over the live list, so a
        tween added or removed by a callback during this pass is seen (or
        skipped) by the same pass.
        """
        if self._completed:
            return

        any_tween_is_playing = False
        for tween in self._tweens:
            if tween.is_playing:
                tween.update(delta_time)
                any_tween_is_playing = any_tween_is_playing or tween.is_playing

        if any_tween_is_playing or not self._started:
            return

        self._completed = True
        self._started = False
        self.remove_all()
        logger.debug(f"Group completed: {self.tag}")

        if self._on_complete_callback is not None:
            callback = self._on_complete_callback
            callback()
            self._on_complete_callback = None

        if self.remove_on_completion and self.registry is not None:
            self.registry.discard(self)


class GroupRegistry:
    """Tag to group lookup plus one reserved default group.

    Hosts that want isolated animation state (tests, multiple scenes) can
    create their own registry; the module-level one backs the convenience
    functions below.
    """

    def __init__(self, default_tag: Optional[str] = None):
        self.default_tag = default_tag or get_settings().default_group_tag
        self._tagged_groups: Dict[str, TweenGroup] = {}
        self._default_group: Optional[TweenGroup] = None

    def get_tagged_groups(self) -> Dict[str, TweenGroup]:
        return self._tagged_groups

    def get_group_with_tag(self, tag: str) -> TweenGroup:
        """Get the group registered under tag, creating it on first use.

        Args:
            tag: Registry key

        Returns:
            The existing or newly registered group
        """
        if tag == self.default_tag:
            return self.get_default_group()

        group = self._tagged_groups.get(tag)
        if group is None:
            group = TweenGroup(tag, registry=self)
            self._tagged_groups[tag] = group
            logger.debug(f"Group created: {tag}")
        return group

    def get_default_group(self) -> TweenGroup:
        """Get the default group; it is never removed on completion."""
        if self._default_group is None:
            self._default_group = TweenGroup(
                self.default_tag,
                registry=self,
                remove_on_completion=False,
            )
            self._tagged_groups[self.default_tag] = self._default_group
        return self._default_group

    def discard(self, group: TweenGroup) -> None:
        """Remove group from the lookup if it is the one registered under its tag."""
        if group is self._default_group:
            return
        if self._tagged_groups.get(group.tag) is group:
            del self._tagged_groups[group.tag]
            logger.debug(f"Group removed from registry: {group.tag}")

    def clear(self) -> None:
        """Forget every group, including the default one."""
        self._tagged_groups.clear()
        self._default_group = None


_registry: Optional[GroupRegistry] = None


def get_registry() -> GroupRegistry:
    """Get the module-level registry, creating it on first access."""
    global _registry
    if _registry is None:
        _registry = GroupRegistry()
    return _registry


def reset_registry() -> GroupRegistry:
    """Replace the module-level registry with a fresh one."""
    global _registry
    _registry = GroupRegistry()
    return _registry


def get_group_with_tag(tag: str) -> TweenGroup:
    return get_registry().get_group_with_tag(tag)


def get_default_group() -> TweenGroup:
    return get_registry().get_default_group()
