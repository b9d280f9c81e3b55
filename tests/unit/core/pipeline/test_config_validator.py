from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies default injection, type coercion with warnings and strict mode.
"""

import pytest

from sizetree.core.pipeline.validator import validate_config
from sizetree.domain.config import get_default_config


def test_defaults_are_injected() -> None:
    clean, warnings = validate_config({})
    assert clean == get_default_config()
    assert warnings == []


def test_non_dict_falls_back_to_defaults() -> None:
    clean, warnings = validate_config(["not", "a", "dict"])
    assert clean == get_default_config()
    assert len(warnings) == 1


def test_string_sizes_and_bools_are_coerced() -> None:
    clean, warnings = validate_config({
        "size_threshold": "5000",
        "use_size_cache": "yes",
        "print_tree": 0,
    })
    assert clean["size_threshold"] == 5000
    assert clean["use_size_cache"] is True
    assert clean["print_tree"] is False
    assert len(warnings) == 3


def test_negative_size_falls_back() -> None:
    clean, warnings = validate_config({"disk_capacity": -1})
    assert clean["disk_capacity"] == get_default_config()["disk_capacity"]
    assert any("non-negative" in w for w in warnings)


def test_bool_is_not_a_size() -> None:
    clean, warnings = validate_config({"size_threshold": True})
    assert clean["size_threshold"] == get_default_config()["size_threshold"]
    assert warnings


def test_unknown_keys_are_dropped() -> None:
    clean, warnings = validate_config({"colour": "blue"})
    assert "colour" not in clean
    assert warnings == ["Unknown field 'colour' ignored."]


def test_required_free_space_above_capacity_warns() -> None:
    _, warnings = validate_config({"disk_capacity": 10, "required_free_space": 20})
    assert any("exceeds" in w for w in warnings)


def test_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config({"size_threshold": "5000"}, strict=True)
    with pytest.raises(ValueError):
        validate_config({"size_threshold": -5}, strict=True)
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


@pytest.mark.parametrize("value", ["²", "1²", "Ⅻ"])
def test_digit_like_size_strings_fall_back(value: str) -> None:
    clean, warnings = validate_config({"size_threshold": value})
    assert clean["size_threshold"] == get_default_config()["size_threshold"]
    assert any("Using fallback" in w for w in warnings)
