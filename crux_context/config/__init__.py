"""Unified configuration layer for context budgeting.

Goals
-----
* Centralize defaults (reserved response tokens, truncation indicator, model).
* Merge sources in a predictable order:
    1. Built-in defaults (``crux_context.config.defaults``)
    2. Optional external config file (JSON or YAML) pointed to by
       ``CRUX_CONTEXT_CONFIG_FILE``
    3. Environment variables (``CRUX_CONTEXT_RESERVED_FOR_RESPONSE`` ...)
    4. In-code overrides passed to ``get_settings``
* Provide a single call site: ``get_settings(overrides=None)``.

External Config File (Optional)
-------------------------------
JSON is attempted first, then YAML. Either a flat mapping or one nested under
a ``context`` key is accepted::

    context:
      reserved_for_response: 2000
      truncation_indicator: " [truncated] "
      default_model: claude-3-opus

The file is read once per process; ``reset_settings_cache`` forces a reload.
Unknown keys are ignored and invalid values fall back to the lower-precedence
source, so settings resolution never raises.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .defaults import (
    DEFAULT_RESERVED_FOR_RESPONSE,
    DEFAULT_TRUNCATION_INDICATOR,
    DEFAULT_TRUNCATION_MODEL,
)
from .env import CONFIG_FILE_ENV, env_overrides


class ContextSettings(BaseModel):
    """Resolved settings for the budgeting layer.

    Attributes
    ----------
    reserved_for_response:
        Tokens held back for the response by ``calculate_budget`` when the
        caller passes no explicit reservation.
    truncation_indicator:
        Marker spliced into truncated text when mapping-style options omit it.
    default_model:
        Model whose counter measures truncation when mapping-style options
        omit ``model``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    reserved_for_response: int = Field(default=DEFAULT_RESERVED_FOR_RESPONSE, ge=0)
    truncation_indicator: str = DEFAULT_TRUNCATION_INDICATOR
    default_model: str = DEFAULT_TRUNCATION_MODEL


_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data: Any = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError:
            data = None
    if isinstance(data, dict) and isinstance(data.get("context"), dict):
        data = data["context"]
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _merge_valid(base: ContextSettings, layer: Dict[str, Any]) -> ContextSettings:
    """Apply ``layer`` on top of ``base`` keeping only values that validate."""
    merged = base
    for key, value in layer.items():
        if key not in ContextSettings.model_fields:
            continue
        try:
            merged = ContextSettings.model_validate({**merged.model_dump(), key: value})
        except ValidationError:
            continue
    return merged


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> ContextSettings:
    """Return merged settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    settings = ContextSettings()
    settings = _merge_valid(settings, _load_external_config())
    settings = _merge_valid(settings, env_overrides())
    if overrides:
        settings = _merge_valid(settings, overrides)
    return settings


def reset_settings_cache() -> None:
    """Forget the cached external config file so the next call re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


__all__ = ["ContextSettings", "get_settings", "reset_settings_cache"]
