"""Validation and JSON tests."""

import pytest
from hypothesis import given, strategies as st

from a2ui_sync.core import (
    JSONParseError,
    ValidationError,
    canonical_json,
    decode_json,
    safe_json_dumps,
    validate_json_depth,
    validate_json_size,
)

json_text = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=8)


def test_validate_json_size():
    """Test JSON size validation."""
    small_data = '{"test": "data"}'
    validate_json_size(small_data, 1000)  # Should pass

    large_data = "x" * 1_000_000
    with pytest.raises(ValidationError):
        validate_json_size(large_data, 1000)


def test_validate_json_size_counts_bytes():
    """Test size is measured in encoded bytes, not characters."""
    with pytest.raises(ValidationError):
        validate_json_size("é" * 6, 10)


def test_validate_json_depth():
    """Test JSON depth validation."""
    shallow = {"a": {"b": {"c": 1}}}
    validate_json_depth(shallow, max_depth=5)  # Should pass

    deep = {"a": [{"b": [{"c": {"d": 1}}]}]}
    with pytest.raises(ValidationError):
        validate_json_depth(deep, max_depth=3)


def test_decode_json():
    """Test decoding and failure."""
    assert decode_json('{"a": [1, 2]}') == {"a": [1, 2]}

    with pytest.raises(JSONParseError):
        decode_json("{broken")


def test_decode_json_repair():
    """Test repair of slightly malformed input."""
    assert decode_json('{"a": 1,}', repair=True) == {"a": 1}


def test_safe_json_dumps():
    """Test compact and indented encoding."""
    assert safe_json_dumps({"a": 1}) == '{"a":1}'
    assert safe_json_dumps({"a": 1}, indent=2) == '{\n  "a": 1\n}'
    # outside 64-bit range
    assert safe_json_dumps(2**70) == str(2**70)


def test_canonical_json_is_compact():
    """Test object and array nodes encode without whitespace."""
    assert canonical_json({"a": [1, "b", None, True]}) == '{"a":[1,"b",null,true]}'


@given(
    st.recursive(
        st.none() | st.booleans() | st.integers(-(2**53), 2**53) | json_text,
        lambda children: st.lists(children, max_size=3)
        | st.dictionaries(json_text, children, max_size=3),
        max_leaves=10,
    )
)
def test_dumps_decodes_back(value):
    """Property test: encoded data model values decode to the same value."""
    assert decode_json(safe_json_dumps(value)) == value
