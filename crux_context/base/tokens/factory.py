"""Token counter factory.

Counters are immutable, so one instance per family is cached for the life of
the process and shared by every caller.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from ..models import ModelFamily
from ..registry import get_model_family
from .counter import HeuristicTokenCounter, TokenCounter
from .unicode_counter import UnicodeTokenCounter


@lru_cache(maxsize=None)
def _counter_for(family: ModelFamily, multilingual: bool) -> TokenCounter:
    if multilingual:
        overhead = HeuristicTokenCounter.for_family(family).message_overhead
        return UnicodeTokenCounter(family=family, message_overhead=overhead)
    return HeuristicTokenCounter.for_family(family)


def get_token_counter(model_or_family: Any, *, multilingual: bool = False) -> TokenCounter:
    """Return the counter for a model id, family string or :class:`ModelFamily`.

    Args:
        model_or_family: e.g. ``"gpt-4o"``, ``"claude"`` or ``ModelFamily.GEMINI``.
            Unrecognized values get the ``unknown`` family profile.
        multilingual: Use the script-aware :class:`UnicodeTokenCounter`
            instead of the family heuristic.
    """
    return _counter_for(get_model_family(model_or_family), multilingual)


__all__ = ["get_token_counter"]
