from __future__ import annotations

import pytest

from herald.events.errors import ListenerConfigurationError
from herald.events.registry import ListenerRegistry


def noop(*args):
    return None


def other(*args):
    return None


def test_listen_returns_registry_for_chaining():
    registry = ListenerRegistry()
    assert registry.listen("a", noop).listen("b", noop) is registry
    assert registry.events() == ["a", "b"]


def test_listen_accepts_several_names():
    registry = ListenerRegistry()
    registry.listen(["a", "b.*", "c"], noop)
    assert registry.events() == ["a", "c"]
    assert registry.patterns() == ["b.*"]


def test_listen_rejects_non_string_names():
    with pytest.raises(TypeError):
        ListenerRegistry().listen(["a", 1], noop)


def test_listen_rejects_object_without_handle():
    with pytest.raises(ListenerConfigurationError):
        ListenerRegistry().listen("a", object())


def test_exact_listeners_before_wildcards_in_registration_order():
    registry = ListenerRegistry()
    registry.listen("user.*", noop)
    registry.listen("user.created", noop)
    registry.listen("*.created", other)
    registry.listen("user.created", other)
    registry.listen("user.*", other)

    found = registry.get_listeners("user.created")
    assert [(l.pattern, l.target) for l in found] == [
        ("user.created", noop),
        ("user.created", other),
        ("user.*", noop),
        ("user.*", other),
        ("*.created", other),
    ]
    assert [l.wildcard for l in found] == [False, False, True, True, True]


def test_duplicate_registration_is_kept():
    registry = ListenerRegistry()
    registry.listen("a", noop).listen("a", noop)
    assert len(registry.get_listeners("a")) == 2


def test_new_wildcard_invalidates_cached_matches():
    registry = ListenerRegistry()
    registry.listen("order.*", noop)
    assert len(registry.get_wildcard_listeners("order.paid")) == 1

    registry.listen("*.paid", other)
    assert [l.target for l in registry.get_wildcard_listeners("order.paid")] == [noop, other]


def test_forget_of_pattern_key_invalidates_cache():
    registry = ListenerRegistry()
    registry.listen("order.*", noop)
    assert registry.get_listeners("order.paid")
    registry.forget("order.*")
    assert registry.get_listeners("order.paid") == ()


def test_has_listeners():
    registry = ListenerRegistry()
    assert not registry.has_listeners("a")
    registry.listen("a", noop)
    registry.listen("b.*", noop)
    assert registry.has_listeners("a")
    assert registry.has_listeners("b.anything")
    # the pattern key itself counts
    assert registry.has_listeners("b.*")
    assert not registry.has_listeners("c")
    assert registry.has_wildcard_listeners("b.x")
    assert not registry.has_wildcard_listeners("a")


def test_forget_removes_only_the_exact_key():
    registry = ListenerRegistry()
    registry.listen("x", noop)
    registry.listen("x*", other)
    registry.forget("x")

    assert [l.target for l in registry.get_listeners("x")] == [other]
    assert registry.has_listeners("x")


def test_has_listeners_false_after_forgetting_sole_entry():
    registry = ListenerRegistry()
    registry.listen("x", noop)
    registry.forget("x")
    assert not registry.has_listeners("x")


def test_forget_unknown_name_is_harmless():
    ListenerRegistry().forget("missing")


def test_clear():
    registry = ListenerRegistry()
    registry.listen("a", noop).listen("b.*", noop)
    registry.clear()
    assert registry.events() == []
    assert registry.patterns() == []
    assert not registry.has_listeners("b.x")


def test_get_listeners_returns_snapshot():
    registry = ListenerRegistry()
    registry.listen("a", noop)
    snapshot = registry.get_listeners("a")
    registry.listen("a", other)
    assert len(snapshot) == 1
    assert len(registry.get_listeners("a")) == 2


def test_wildcard_cache_stays_bounded():
    registry = ListenerRegistry(cache_size=64)
    registry.listen("audit.*", noop)

    for i in range(10_000):
        registry.get_listeners(f"user.{i}.updated")

    assert len(registry._wildcards_cache) == 64
    assert registry.has_listeners("audit.login")
    assert len(registry.get_listeners("audit.login")) == 1


def test_recently_used_names_stay_cached():
    registry = ListenerRegistry(cache_size=2)
    registry.listen("audit.*", noop)

    first = registry.get_wildcard_listeners("audit.a")
    registry.get_wildcard_listeners("audit.b")
    assert registry.get_wildcard_listeners("audit.a") is first
    registry.get_wildcard_listeners("audit.c")

    assert list(registry._wildcards_cache) == ["audit.a", "audit.c"]


def test_names_are_not_cached_without_patterns():
    registry = ListenerRegistry()
    registry.listen("a", noop)
    registry.get_listeners("a")
    registry.get_listeners("b")
    assert len(registry._wildcards_cache) == 0


def test_cache_size_must_be_positive():
    with pytest.raises(ValueError):
        ListenerRegistry(cache_size=0)
