from __future__ import annotations

"""
Configuration Validation Service.

Converts untrusted configuration mappings into a typed TreeConfig. Invalid
fields fall back to domain defaults and are reported as warnings, or raise
when strict validation is requested.
"""

import logging
from typing import Any, List, Tuple

from pathtree.domain.config import TreeConfig, get_default_config
from pathtree.domain.constants import SUPPORTED_FLAVORS

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[TreeConfig, List[str]]:
    """
    Validate and normalize a raw configuration mapping.

    Missing keys are filled with defaults. Unknown keys are ignored with a
    warning.

    Args:
        config: Raw configuration data (a dict or an existing TreeConfig).
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[TreeConfig, List[str]]: The normalized configuration and a list
                                      of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if isinstance(config, TreeConfig):
        config = config.to_dict()

    if config is None:
        return defaults, warnings

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    known = set(defaults.to_dict())
    for key in sorted(set(config) - known):
        warnings.append(f"Unknown config field '{key}' ignored.")

    indent_unit = _as_str(
        config.get("indent_unit"), defaults.indent_unit, "indent_unit", warnings, strict
    )
    sort_children = _as_bool(
        config.get("sort_children"), defaults.sort_children, "sort_children", warnings, strict
    )
    flavor = _as_flavor(config.get("flavor"), defaults.flavor, warnings, strict)

    for w in warnings:
        logger.debug(f"Config warning: {w}")

    return TreeConfig(indent_unit=indent_unit, sort_children=sort_children, flavor=flavor), warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate string inputs. Whitespace is significant for indentation."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Validate boolean inputs, accepting common string spellings."""
    if value is None:
        return fallback
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False

    msg = f"Invalid field '{field}': expected bool, received {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_flavor(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Validate the path flavor against the supported separator rules."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().lower() in SUPPORTED_FLAVORS:
        return value.strip().lower()

    msg = f"Invalid field 'flavor': unsupported value {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
