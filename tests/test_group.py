"""Tests for TweenGroup and GroupRegistry."""

import pytest

from tweener import (
    GroupRegistry,
    Tween,
    TweenGroup,
    get_default_group,
    get_group_with_tag,
    get_registry,
    reset_registry,
)


def make_tween(group, duration=100, **end):
    return Tween(duration, group=group).from_({"x": 0}).to(end or {"x": 1})


class Counter:
    """Counts zero-argument calls."""

    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


class TestMembership:
    """Test add/remove/get_all."""

    def test_add_marks_started(self):
        group = TweenGroup("g")
        tween = make_tween(group)
        group.add(tween)
        assert group.is_started
        assert not group.is_completed()
        assert group.get_all() == [tween]

    def test_remove_by_id(self):
        group = TweenGroup("g")
        a, b = make_tween(group), make_tween(group)
        group.add(a)
        group.add(b)
        assert group.remove(a) is True
        assert group.get_all() == [b]
        assert group.remove(a) is False

    def test_remove_only_first_duplicate(self):
        group = TweenGroup("g")
        a = make_tween(group)
        group.add(a)
        group.add(a)
        group.remove(a)
        assert group.get_all() == [a]

    def test_remove_all(self):
        group = TweenGroup("g")
        make_tween(group).start()
        make_tween(group).start()
        group.remove_all()
        assert group.get_all() == []


class TestUpdate:
    """Test advancing the group."""

    def test_updates_members_in_insertion_order(self):
        order = []
        group = TweenGroup("g")
        for name in ("a", "b", "c"):
            make_tween(group).on_update(lambda dt, obj, name=name: order.append(name)).start()
        group.update(10)
        assert order == ["a", "b", "c"]

    def test_skips_members_that_are_not_playing(self):
        group = TweenGroup("g")
        idle = make_tween(group)
        group.add(idle)
        playing = make_tween(group).start()
        group.update(50)
        assert idle.ratio == 0
        assert playing.ratio == pytest.approx(0.5)

    def test_completion_fires_once(self):
        done = Counter()
        group = TweenGroup("g").on_complete(done)
        make_tween(group, duration=100).start()
        make_tween(group, duration=200).start()

        group.update(100)
        assert done.count == 0
        assert not group.is_completed()

        group.update(100)
        assert done.count == 1
        assert group.is_completed()
        assert not group.is_started
        assert group.get_all() == []
        assert group.completion_callback is None

        group.update(100)
        assert done.count == 1

    def test_unstarted_group_never_completes(self):
        done = Counter()
        group = TweenGroup("g").on_complete(done)
        group.update(100)
        assert done.count == 0
        assert not group.is_completed()

    def test_completes_after_last_member_stops(self):
        done = Counter()
        group = TweenGroup("g").on_complete(done)
        tween = make_tween(group).start()
        tween.stop()
        group.update(10)
        assert done.count == 1

    def test_group_can_run_again_after_completion(self):
        done = Counter()
        group = TweenGroup("g").on_complete(done)
        make_tween(group).start()
        group.update(100)
        assert group.is_completed()

        group.on_complete(done)
        make_tween(group).start()
        assert not group.is_completed()
        group.update(100)
        assert done.count == 2

    def test_chained_tween_runs_in_same_pass(self):
        """A tween started by a callback during update joins the current pass."""
        group = TweenGroup("g")
        second = make_tween(group, duration=1000)
        make_tween(group, duration=100).chain(second).start()
        group.update(100)
        assert second.is_playing
        assert second.ratio == pytest.approx(0.1)

    def test_member_stopped_by_callback_is_not_updated(self):
        group = TweenGroup("g")
        first = make_tween(group)
        second = make_tween(group)
        third = make_tween(group)
        first.on_update(lambda dt, obj: second.stop()).start()
        second.start()
        third.start()

        group.update(50)
        assert second.ratio == 0
        assert third.ratio == pytest.approx(0.5)

    def test_on_group_completed_only_sets_once(self):
        first = Counter()
        second = Counter()
        group = TweenGroup("g")
        make_tween(group).on_group_completed(first).on_group_completed(second).start()
        group.update(100)
        assert first.count == 1
        assert second.count == 0


class TestRegistry:
    """Test tag lookup and the default group."""

    def test_get_group_with_tag_is_lazy_and_stable(self, registry):
        group = registry.get_group_with_tag("ui")
        assert isinstance(group, TweenGroup)
        assert registry.get_group_with_tag("ui") is group
        assert group.remove_on_completion is True
        assert registry.get_tagged_groups() == {"ui": group}

    def test_default_group(self, registry):
        default = registry.get_default_group()
        assert registry.get_default_group() is default
        assert default.remove_on_completion is False
        assert default.tag == "test.default"
        assert registry.get_tagged_groups()["test.default"] is default

    def test_default_tag_is_reserved(self, registry):
        assert registry.get_group_with_tag("test.default") is registry.get_default_group()

    def test_tagged_group_removed_after_completion(self, registry):
        done = Counter()
        group = registry.get_group_with_tag("fx").on_complete(done)
        Tween(100, group=group).from_({"x": 0}).to({"x": 1}).start()
        group.update(100)

        assert done.count == 1
        assert "fx" not in registry.get_tagged_groups()
        assert registry.get_group_with_tag("fx") is not group

    def test_default_group_never_removed(self, registry):
        done = Counter()
        default = registry.get_default_group().on_complete(done)
        Tween(100, registry=registry).from_({"x": 0}).to({"x": 1}).start()
        default.update(100)

        assert done.count == 1
        assert registry.get_tagged_groups()[registry.default_tag] is default
        assert registry.get_default_group() is default

    def test_discard_ignores_replaced_group(self, registry):
        old = registry.get_group_with_tag("fx")
        registry.discard(old)
        new = registry.get_group_with_tag("fx")
        registry.discard(old)
        assert registry.get_tagged_groups()["fx"] is new

    def test_clear(self, registry):
        default = registry.get_default_group()
        registry.get_group_with_tag("a")
        registry.clear()
        assert registry.get_tagged_groups() == {}
        assert registry.get_default_group() is not default

    def test_registries_are_independent(self, registry):
        other = GroupRegistry(default_tag="test.default")
        assert other.get_group_with_tag("ui") is not registry.get_group_with_tag("ui")
        assert other.get_default_group() is not registry.get_default_group()


class TestModuleRegistry:
    """Test the module-level convenience functions."""

    def test_functions_share_registry(self):
        registry = get_registry()
        assert get_default_group() is registry.get_default_group()
        assert get_group_with_tag("ui") is registry.get_group_with_tag("ui")

    def test_default_tag_from_settings(self):
        assert get_default_group().tag == "tweener.default"

    def test_reset_registry(self):
        old_default = get_default_group()
        new_registry = reset_registry()
        assert get_registry() is new_registry
        assert get_default_group() is not old_default

    def test_tagged_group_pruned_from_module_registry(self):
        group = get_group_with_tag("menu")
        Tween.create_with_tag(100, "menu").from_({"x": 0}).to({"x": 1}).start()
        group.update(100)
        assert "menu" not in get_registry().get_tagged_groups()
