"""Static context-window table.

``MODEL_CONTEXT_WINDOWS`` is a read-only view built once at import time and
never mutated, so it can be shared across threads without locking. Lookups
are exact (after trimming and lowercasing); ids that are not listed get
``DEFAULT_CONTEXT_WINDOW`` even when their family is known, because windows
differ inside a family (``gpt-4`` vs ``gpt-4-turbo``).
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from ...config.defaults import DEFAULT_CONTEXT_WINDOW
from ..logging import get_logger, log_event
from .families import get_model_family

_logger = get_logger("crux_context.registry")

MODEL_CONTEXT_WINDOWS: Mapping[str, int] = MappingProxyType(
    {
        # GPT-4 family
        "gpt-4": 8192,
        "gpt-4-32k": 32768,
        "gpt-4-turbo": 128000,
        "gpt-4-turbo-preview": 128000,
        "gpt-4o": 128000,
        "gpt-4o-mini": 128000,
        # GPT-3.5 family
        "gpt-3.5-turbo": 16385,
        "gpt-3.5-turbo-16k": 16385,
        # Claude family
        "claude-3-opus": 200000,
        "claude-3-sonnet": 200000,
        "claude-3-haiku": 200000,
        "claude-3-5-sonnet": 200000,
        "claude-3-5-haiku": 200000,
        "claude-2": 100000,
        "claude-2.1": 200000,
        "claude-instant": 100000,
        # Gemini family
        "gemini-pro": 32760,
        "gemini-1.0-pro": 32760,
        "gemini-1.5-pro": 1000000,
        "gemini-1.5-flash": 1000000,
    }
)


def get_context_window(model_id: Any) -> int:
    """Return the context window for ``model_id``.

    Falls back to ``DEFAULT_CONTEXT_WINDOW`` (8192) for unknown ids; never raises.
    """
    key = model_id.strip().lower() if isinstance(model_id, str) else ""
    window = MODEL_CONTEXT_WINDOWS.get(key)
    if window is not None:
        return window
    log_event(
        _logger,
        "registry.default_window",
        level=logging.DEBUG,
        model=str(model_id),
        default_window=DEFAULT_CONTEXT_WINDOW,
    )
    return DEFAULT_CONTEXT_WINDOW


def list_supported_models(family: Optional[Any] = None) -> List[str]:
    """List table model ids, optionally restricted to one family.

    Args:
        family: A :class:`ModelFamily`, a family string or a model id. ``None``
            lists everything.

    Returns:
        Sorted model ids.
    """
    if family is None:
        return sorted(MODEL_CONTEXT_WINDOWS)
    wanted = get_model_family(family)
    return sorted(m for m in MODEL_CONTEXT_WINDOWS if get_model_family(m) is wanted)


__all__ = [
    "MODEL_CONTEXT_WINDOWS",
    "get_context_window",
    "list_supported_models",
]
