"""Tests for string and form bindings."""

import pytest

from a2ui_sync.binding.bindings import FormBinding, StringBinding
from a2ui_sync.models import BoundValue, LiteralValue


# ============================================================================
# StringBinding
# ============================================================================

@pytest.mark.unit
def test_string_binding_literal(store, compiler):
    """Test plain literals and their text forms."""
    assert StringBinding(store, compiler, "main", LiteralValue(value="Hi")).value == "Hi"
    assert StringBinding(store, compiler, "main", LiteralValue(value=2.0)).value == "2"
    assert StringBinding(store, compiler, "main", LiteralValue(value=True)).value == "true"


@pytest.mark.unit
def test_string_binding_default(store, compiler):
    """Test missing sources and absent values fall back to the default."""
    assert StringBinding(store, compiler, "main", None, default="-").value == "-"
    assert StringBinding(store, compiler, "main", LiteralValue(), default="-").value == "-"
    assert StringBinding(store, compiler, "main", BoundValue(path="/gone"), default="-").value == "-"


@pytest.mark.unit
def test_string_binding_bound_tracks_writes(store, compiler):
    """Test bound text follows the data model."""
    binding = StringBinding(store, compiler, "main", BoundValue(path="/user/name"))
    store.set_data_value("main", "/user/name", "Ada")
    assert binding.value == "Ada"
    store.set_data_value("main", "/user/name", "Grace")
    assert str(binding) == "Grace"


@pytest.mark.unit
def test_string_binding_template(store, compiler):
    """Test literal templates interpolate against the current model."""
    binding = StringBinding(
        store, compiler, "main", LiteralValue(value="Hello, ${name}! \\${x}"), base_path="/user"
    )
    store.set_data_value("main", "/user/name", "Ada")
    assert binding.value == "Hello, Ada! ${x}"
    assert binding.dependencies == ["/user/name"]


@pytest.mark.unit
def test_string_binding_relative_path(store, compiler):
    """Test bound paths resolve against the base path."""
    store.set_data_value("main", "/items", [{"title": "first"}])
    binding = StringBinding(store, compiler, "main", BoundValue(path="title"), base_path="/items/0")
    assert binding.value == "first"
    assert binding.dependencies == ["/items/0/title"]


# ============================================================================
# FormBinding
# ============================================================================

@pytest.mark.unit
def test_form_binding_bound_roundtrip(store):
    """Test writes land in the data model and are seen by other readers."""
    binding = FormBinding(store, "main", BoundValue(path="form/name"), "")
    other = FormBinding(store, "main", BoundValue(path="/form/name"), "")

    assert binding.get() == ""
    binding.set("Ada")

    assert store.get_data_value("main", "/form/name") == "Ada"
    assert other.get() == "Ada"
    assert binding.dependencies == ["/form/name"]


@pytest.mark.unit
def test_form_binding_literal_is_local(store):
    """Test literal sources keep edits to themselves."""
    binding = FormBinding(store, "main", LiteralValue(value=False), True)
    assert binding.get() is False

    binding.set(True)
    assert binding.get() is True
    assert store.get_data_model("main") is None
    assert binding.dependencies == []


@pytest.mark.unit
def test_form_binding_default(store):
    """Test absent values read as the default."""
    assert FormBinding(store, "main", None, 5).get() == 5
    assert FormBinding(store, "main", BoundValue(path="/n"), 5).get() == 5
