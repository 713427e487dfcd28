"""Validation tests."""

import pytest
from hypothesis import given, strategies as st
from returns.pipeline import is_successful

from core import (
    ValidationError,
    UIDescriptionValidator,
    validate_json_size,
    validate_json_depth,
    validate_ui_description,
    extract_json,
    safe_json_dumps,
    JSONParseError,
)


def test_validate_json_size():
    """Test JSON size validation."""
    small_data = '{"test": "data"}'
    validate_json_size(small_data, 1000)  # Should pass

    large_data = "x" * 1_000_000
    with pytest.raises(ValidationError):
        validate_json_size(large_data, 1000)


def test_validate_json_size_counts_bytes():
    """Test size is measured in UTF-8 bytes, not characters."""
    with pytest.raises(ValidationError):
        validate_json_size("é" * 6, 10)


def test_validate_json_depth():
    """Test JSON depth validation."""
    shallow = {"a": {"b": {"c": 1}}}
    validate_json_depth(shallow, max_depth=5)  # Should pass

    # Create deeply nested structure
    deep = {"level": 1}
    current = deep
    for i in range(25):
        current["nested"] = {"level": i + 2}
        current = current["nested"]

    with pytest.raises(ValidationError):
        validate_json_depth(deep, max_depth=20)


def test_ui_description_validator():
    """Test envelope checks."""
    UIDescriptionValidator.validate({"type": "Card"}, '{"type": "Card"}')

    with pytest.raises(ValidationError, match="non-null object"):
        UIDescriptionValidator.validate(None)

    with pytest.raises(ValidationError, match="type property"):
        UIDescriptionValidator.validate({"props": {}})

    with pytest.raises(ValidationError, match="exceeds maximum"):
        UIDescriptionValidator.validate({"type": "Card"}, '{"type": "Card"}', max_size=4)


def test_validate_ui_description_result():
    """Test Result pattern version."""
    assert is_successful(validate_ui_description({"type": "Card"}))

    result = validate_ui_description({"type": ""})
    assert not is_successful(result)
    assert "type property" in result.failure().message


def test_extract_json_fenced():
    text = 'Here you go:\n```json\n{"type": "Card"}\n```\nDone.'
    assert extract_json(text) == {"type": "Card"}


def test_extract_json_without_repair():
    with pytest.raises(JSONParseError, match="Invalid JSON"):
        extract_json('{"type": "Card",}', repair=False)


def test_extract_json_rejects_non_object():
    with pytest.raises(JSONParseError):
        extract_json("[1, 2, 3]")


def test_safe_json_dumps():
    assert safe_json_dumps({"a": 1}) == '{"a":1}'
    assert safe_json_dumps({"a": 1}, indent=2) == '{\n  "a": 1\n}'
    assert safe_json_dumps({"big": 2**70}) == '{"big": 1180591620717411303424}'


@given(st.text(min_size=1, max_size=50))
def test_any_non_empty_type_passes_envelope(component_type):
    """Property test: any non-empty string type passes the envelope check."""
    assert is_successful(validate_ui_description({"type": component_type}))
