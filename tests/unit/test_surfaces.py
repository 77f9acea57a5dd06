"""Tests for the surface registry."""

import pytest

from a2ui_sync.models import ComponentNode


@pytest.mark.unit
def test_init_surface(registry):
    """Test a new surface gets its root and styles."""
    registry.init_surface("main", "root", {"primaryColor": "#00f"})

    surface = registry.get_surface("main")
    assert surface.surface_id == "main"
    assert surface.root == "root"
    assert surface.styles == {"primaryColor": "#00f"}
    assert surface.components == {}
    assert "main" in registry


@pytest.mark.unit
def test_init_existing_surface_keeps_components(registry):
    """Test re-initialising overwrites root, merges styles, keeps components."""
    registry.init_surface("main", "root", {"font": "serif", "primaryColor": "#00f"})
    registry.update_surface("main", [{"id": "root", "component": {"Text": {}}}])
    registry.init_surface("main", "other", {"primaryColor": "#f00"})

    surface = registry.get_surface("main")
    assert surface.root == "other"
    assert surface.styles == {"font": "serif", "primaryColor": "#f00"}
    assert "root" in surface.components


@pytest.mark.unit
def test_update_upserts_by_id(registry):
    """Test components are replaced by id and never implicitly removed."""
    registry.update_surface(
        "main",
        [
            {"id": "a", "component": {"Text": {"text": {"literalString": "1"}}}},
            {"id": "b", "component": {"Text": {"text": {"literalString": "2"}}}},
        ],
    )
    registry.update_surface(
        "main",
        [ComponentNode(id="a", component={"Text": {"text": {"literalString": "changed"}}})],
    )

    surface = registry.get_surface("main")
    assert set(surface.components) == {"a", "b"}
    assert surface.components["a"].properties["text"] == {"literalString": "changed"}


@pytest.mark.unit
def test_update_unknown_surface_creates_it(registry):
    """Test components may arrive before beginRendering."""
    registry.update_surface("late", [{"id": "x", "component": {"Divider": {}}}])

    surface = registry.get_surface("late")
    assert surface.root is None
    assert list(registry.renderable()) == []

    registry.init_surface("late", "x")
    assert [s.surface_id for s in registry.renderable()] == ["late"]


@pytest.mark.unit
def test_get_component(registry):
    """Test component lookup, including dangling ids."""
    registry.update_surface("main", [{"id": "a", "component": {"Text": {}}}])
    assert registry.get_component("main", "a").component_type == "Text"
    assert registry.get_component("main", "missing") is None
    assert registry.get_component("nope", "a") is None


@pytest.mark.unit
def test_returned_surface_is_a_copy(registry):
    """Test mutating a returned surface leaves the registry alone."""
    registry.init_surface("main", "root")
    surface = registry.get_surface("main")
    surface.root = "hijacked"
    surface.styles["x"] = "y"

    assert registry.get_surface("main").root == "root"
    assert registry.get_surface("main").styles == {}


@pytest.mark.unit
def test_delete_surface(registry):
    """Test deletion and unknown ids."""
    registry.init_surface("a", "root")
    registry.init_surface("b", "root")

    assert registry.delete_surface("a") is True
    assert registry.delete_surface("a") is False
    assert registry.get_surface("a") is None
    assert registry.surface_ids == ["b"]
    assert len(registry) == 1
