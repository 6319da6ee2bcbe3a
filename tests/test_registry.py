"""Tests for named registries and chart contexts."""

import pytest

from stackplot.context import ChartContext
from stackplot.errors import DuplicateNameError, NotFoundError
from stackplot.registry import Registry


def _make_registry():
    registry = Registry()
    registry.add("a", 1).add("b", 2)
    return registry


def test_add_and_get():
    """Entries are retrievable under their names, in registration order."""
    registry = _make_registry()
    assert registry.get("a") == 1
    assert registry.list() == ["a", "b"]
    assert list(registry) == ["a", "b"]
    assert len(registry) == 2
    assert "a" in registry
    assert "z" not in registry


def test_add_duplicate_raises():
    """Names can only be added once."""
    registry = _make_registry()
    with pytest.raises(DuplicateNameError):
        registry.add("a", 3)
    assert registry.get("a") == 1


def test_get_unknown_raises():
    """Unknown names raise NotFoundError, which is also a KeyError."""
    registry = _make_registry()
    with pytest.raises(NotFoundError):
        registry.get("z")
    with pytest.raises(KeyError):
        registry.get(["unhashable"])


def test_set_replaces_and_none_deletes():
    """set() overwrites an entry, and set(name, None) removes it."""
    registry = _make_registry()
    registry.set("a", 10).set("c", 3)
    assert registry.get("a") == 10
    assert registry.list() == ["a", "b", "c"]
    registry.set("b", None)
    assert registry.list() == ["a", "c"]


def test_remove():
    """remove() drops an entry; removing twice raises."""
    registry = _make_registry()
    registry.remove("a")
    assert registry.list() == ["b"]
    with pytest.raises(NotFoundError):
        registry.remove("a")


def test_error_messages_are_readable():
    """KeyError-based errors do not quote their message."""
    registry = _make_registry()
    with pytest.raises(NotFoundError) as excinfo:
        registry.get("z")
    assert str(excinfo.value) == "entry 'z' is not registered"


def test_contexts_are_independent():
    """Registering in one context leaves other contexts alone."""
    first = ChartContext.default()
    second = ChartContext.default()
    first.scale_functions.add("custom", lambda parameters, value: value)
    first.data_layers.remove("intervals")
    assert "custom" not in second.scale_functions
    assert "intervals" in second.data_layers
