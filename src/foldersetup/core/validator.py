from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary conforms to the expected schema
before it reaches the interface controllers. Handles type coercion and
default value injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from foldersetup.domain.config import OUTPUT_FORMATS, get_default_config

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")


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

    Converts untrusted inputs (e.g., from the CLI) into strictly typed
    parameters and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
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
    string_fields = ["output_format", "log_level", "log_file"]
    bool_fields = ["include_root", "folders_only"]

    # 3. Field Processing & Normalization
    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults.get(field, ""), field, warnings, strict
        )

    for field in bool_fields:
        merged[field] = _as_bool(
            merged.get(field), defaults.get(field, False), field, warnings, strict
        )

    # 4. Enumerated values
    merged["output_format"] = _as_choice(
        merged["output_format"].lower(), OUTPUT_FORMATS,
        defaults["output_format"], "output_format", warnings, strict
    )
    merged["log_level"] = _as_choice(
        merged["log_level"].upper(), _LOG_LEVELS,
        defaults["log_level"], "log_level", warnings, strict
    )

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
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: str,
        choices: Tuple[str, ...],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Restrict a string field to a closed set of accepted values."""
    if value in choices:
        return value

    msg = f"Invalid field '{field}': '{value}' is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
