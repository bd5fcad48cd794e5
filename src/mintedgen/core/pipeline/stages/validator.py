from __future__ import annotations

"""
Configuration Validation Service.

Ensures the configuration dictionary conforms to the expected schema before
a run. Handles type coercion, extension normalization and default value
injection, collecting warnings instead of failing unless strict mode is on.
"""

import logging
from typing import Any, Dict, List, Tuple

from mintedgen.domain.config import GEOMETRY_FIELDS, get_default_config
from mintedgen.domain.constants import DEFAULT_DOCUMENT_MODE, DOCUMENT_MODES

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
        strict: If True, raises exceptions on invalid values instead of coercing.

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

    # 2. Field Processing & Normalization
    for field in ("input_path", "output_path"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["ignored_names"] = _as_list_str(
        merged.get("ignored_names"), defaults["ignored_names"], "ignored_names", warnings, strict
    )
    merged["language_map"] = _as_language_map(
        merged.get("language_map"), defaults["language_map"], warnings, strict
    )

    for field in GEOMETRY_FIELDS:
        merged[field] = _as_positive_float(merged.get(field), defaults[field], field, warnings, strict)

    merged["document_mode"] = _as_choice(
        merged.get("document_mode"), DOCUMENT_MODES, DEFAULT_DOCUMENT_MODE, "document_mode", warnings, strict
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


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return items

    if isinstance(value, (list, tuple, set)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str) and item.strip():
                out.append(item.strip())
            else:
                msg = f"Invalid item in '{field}[{i}]': expected non-empty str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_positive_float(value: Any, fallback: float, field: str, warnings: List[str], strict: bool) -> float:
    """Coerce numeric (or numeric string) input into a positive float."""
    if value is None:
        return fallback

    number = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
    elif isinstance(value, str) and not strict:
        try:
            number = float(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to {number}.")
        except ValueError:
            number = None

    if number is not None and number > 0:
        return number

    msg = f"Invalid field '{field}': expected positive number, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_choice(
        value: Any,
        choices: Tuple[str, ...],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool
) -> str:
    """Restrict a string field to a fixed set of values."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()

    msg = f"Invalid field '{field}': expected one of {', '.join(choices)}, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _as_language_map(
        value: Any,
        fallback: Dict[str, str],
        warnings: List[str],
        strict: bool
) -> Dict[str, str]:
    """Ensure a str->str mapping whose extension keys are prefixed with a dot."""
    if value is None:
        return dict(fallback)

    if not isinstance(value, dict):
        msg = f"Invalid field 'language_map': expected dict, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return dict(fallback)

    out: Dict[str, str] = {}
    for ext, language in value.items():
        if not isinstance(ext, str) or not isinstance(language, str) or not ext.strip() or not language.strip():
            msg = f"Invalid language mapping {ext!r} -> {language!r}."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Entry discarded.")
            continue

        e = ext.strip()
        if not e.startswith("."):
            if strict:
                raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
            warnings.append(f"Extension '{ext}' corrected to '.{e}'.")
            e = "." + e
        out[e] = language.strip()

    return out
