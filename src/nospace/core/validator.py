from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between untrusted configuration sources (stored
JSON, CLI overrides) and the query engine. Handles type coercion, range
checks and default value injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from nospace.domain.config import get_default_config
from nospace.domain.constants import PART_CHOICES

logger = logging.getLogger(__name__)


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
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions instead of coercing or falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Schema Definition
    string_fields = ["input_path", "parts"]
    bool_fields = ["strict_root", "show_tree"]
    int_fields = ["small_dir_threshold", "disk_capacity", "required_free_space"]

    # 3. Field Processing & Normalization
    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults[field], field, warnings, strict
        )

    for field in bool_fields:
        merged[field] = _as_bool(
            merged.get(field), defaults[field], field, warnings, strict
        )

    for field in int_fields:
        merged[field] = _as_non_negative_int(
            merged.get(field), defaults[field], field, warnings, strict
        )

    # 4. Domain-Specific Normalization
    merged["parts"] = _normalize_parts(merged["parts"], warnings, strict)
    _check_disk_budget(merged, defaults, warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback
    if isinstance(value, int) and not isinstance(value, bool) and not strict:
        warnings.append(f"Field '{field}' converted from number {value} to str.")
        return str(value)

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
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


def _as_non_negative_int(
        value: Any,
        fallback: int,
        field: str,
        warnings: List[str],
        strict: bool
) -> int:
    """Coerce numeric inputs into non-negative integers."""
    if value is None:
        return fallback

    number: Any = None
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif not strict and isinstance(value, str) and value.strip().isdigit():
        number = int(value.strip())
        warnings.append(f"Field '{field}' converted from '{value}' to int.")

    if number is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if number < 0:
        msg = f"Invalid field '{field}': must be non-negative, received {number}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return number


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_parts(parts: str, warnings: List[str], strict: bool) -> str:
    """Restrict the parts selector to the supported choices."""
    p = parts.strip().lower()
    if p in PART_CHOICES:
        return p

    msg = f"Invalid parts selector '{parts}': expected one of {', '.join(PART_CHOICES)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using 'all'.")
    return "all"


def _check_disk_budget(
        merged: Dict[str, Any],
        defaults: Dict[str, Any],
        warnings: List[str],
        strict: bool
) -> None:
    """Required free space cannot exceed the disk capacity."""
    if merged["required_free_space"] <= merged["disk_capacity"]:
        return

    msg = (
        f"required_free_space ({merged['required_free_space']}) exceeds "
        f"disk_capacity ({merged['disk_capacity']})."
    )
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using default disk settings.")
    merged["disk_capacity"] = defaults["disk_capacity"]
    merged["required_free_space"] = defaults["required_free_space"]
