from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the configuration dictionary before an analysis runs: fills
missing keys with defaults and coerces untrusted values (CLI, JSON file)
into the expected types, collecting a warning for every correction.
"""

import logging
from typing import Any, Dict, List, Tuple

from sizetree.domain.config import get_default_config

logger = logging.getLogger(__name__)

STRING_FIELDS = ["input_path", "log_level", "log_file"]
BOOL_FIELDS = ["use_size_cache", "print_tree"]
SIZE_FIELDS = ["size_threshold", "disk_capacity", "required_free_space"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise on invalid values instead of falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a negative size.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown field '{key}' ignored.")
        merged.pop(key)

    for field in STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in SIZE_FIELDS:
        merged[field] = _as_size(merged.get(field), defaults[field], field, warnings, strict)

    if merged["required_free_space"] > merged["disk_capacity"]:
        warnings.append(
            "Field 'required_free_space' exceeds 'disk_capacity'; every analysis will "
            "report no directory large enough."
        )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_size(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce a byte count: a non-negative int, or a decimal string outside strict mode."""
    if value is None:
        return fallback

    if isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return value
        msg = f"Invalid field '{field}': size must be non-negative, received {value}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if not strict and isinstance(value, str) and value.strip().isdecimal():
        warnings.append(f"Field '{field}' converted from '{value}' to int.")
        return int(value.strip())

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
