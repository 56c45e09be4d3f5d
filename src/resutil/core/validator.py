from __future__ import annotations

"""
Configuration Validation Service.

Normalizes an untrusted session configuration (CLI overrides, JSON files)
into strictly typed values, filling missing keys with defaults and
collecting human-readable warnings for every coercion.
"""

import logging
from typing import Any, Dict, List, Tuple

from resutil.domain.config import get_default_config
from resutil.infra.logging.config import LEVEL_NAMES

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["code_unit", "path", "log_level", "log_file"]
_BOOL_FIELDS = ["recursive", "list_directories", "show_content", "json_output"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a session configuration.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type mismatches instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, on any type mismatch.
        ValueError: In strict mode, on an unknown log level.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base type validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    unknown = sorted(k for k in config if k not in defaults)
    if unknown:
        warnings.append(f"Ignored unknown keys: {', '.join(unknown)}.")

    # 2. Field coercion
    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    # 3. Domain normalization
    merged["path"] = merged["path"].strip("/")
    merged["log_level"] = _normalize_level(merged["log_level"], defaults["log_level"], warnings, strict)

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and trim string inputs."""
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
    """Coerce numbers and human-friendly keywords into booleans."""
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


def _normalize_level(level: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Upper-case a level name and reject unknown names."""
    name = level.upper()
    if name in LEVEL_NAMES:
        return name
    msg = f"Unknown log level '{level}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback
