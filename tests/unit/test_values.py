"""Tests for value-source resolution."""

import pytest

from a2ui_sync.binding.values import ValueResolver
from a2ui_sync.models import BoundValue, LiteralValue


@pytest.mark.unit
def test_literal_ignores_store(store):
    """Test literals resolve to themselves."""
    resolver = ValueResolver(store)
    assert resolver.resolve("main", LiteralValue(value="hi")) == "hi"
    assert resolver.resolve("main", LiteralValue(value=0)) == 0


@pytest.mark.unit
def test_bound_reads_current_value(store):
    """Test bound sources see the latest write."""
    resolver = ValueResolver(store)
    source = BoundValue(path="/user/name")

    assert resolver.resolve("main", source) is None
    store.set_data_value("main", "/user/name", "Ada")
    assert resolver.resolve("main", source) == "Ada"
    store.set_data_value("main", "/user/name", "Grace")
    assert resolver.resolve("main", source) == "Grace"


@pytest.mark.unit
def test_bound_is_surface_scoped(store):
    """Test the same path resolves per surface."""
    resolver = ValueResolver(store)
    store.set_data_value("a", "/v", 1)
    assert resolver.resolve("b", BoundValue(path="/v")) is None


@pytest.mark.unit
def test_unknown_source_raises(store):
    """Test non-variants are refused."""
    with pytest.raises(TypeError):
        ValueResolver(store).resolve("main", {"path": "/x"})
