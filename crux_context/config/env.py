"""crux_context.config.env
========================

Environment variable names and small parsing helpers for the settings layer.

Design Notes
------------
- ``ENV_MAP`` maps each settings field to its environment variable.
- Helpers never raise on unset or malformed values; they return ``None`` and
  let the caller keep the lower-precedence value.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

CONFIG_FILE_ENV = "CRUX_CONTEXT_CONFIG_FILE"

# Settings field -> environment variable
ENV_MAP: Dict[str, str] = {
    "reserved_for_response": "CRUX_CONTEXT_RESERVED_FOR_RESPONSE",
    "truncation_indicator": "CRUX_CONTEXT_TRUNCATION_INDICATOR",
    "default_model": "CRUX_CONTEXT_DEFAULT_MODEL",
}

_INT_FIELDS = frozenset({"reserved_for_response"})


def get_env_var_name(field: str) -> Optional[str]:
    """Return the environment variable backing a settings field, if any."""
    return ENV_MAP.get(field)


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a non-negative integer from an env string; ``None`` on failure."""
    if value is None:
        return None
    try:
        parsed = int(value.strip())
    except ValueError:
        return None
    return parsed if parsed >= 0 else None


def env_overrides() -> Dict[str, Any]:
    """Collect settings overrides present in the environment.

    Integer fields that fail to parse are skipped. String fields are taken
    verbatim, so an empty ``CRUX_CONTEXT_TRUNCATION_INDICATOR`` disables the
    indicator.
    """
    out: Dict[str, Any] = {}
    for field, var in ENV_MAP.items():
        raw = os.getenv(var)
        if raw is None:
            continue
        if field in _INT_FIELDS:
            parsed = parse_int(raw)
            if parsed is not None:
                out[field] = parsed
        else:
            out[field] = raw
    return out


__all__ = [
    "CONFIG_FILE_ENV",
    "ENV_MAP",
    "get_env_var_name",
    "parse_int",
    "env_overrides",
]
