"""Budget calculator.

Combines the context-window table with the family token counter to report how
much of a model's window a conversation uses once room for the response is
held back.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from ...config import get_settings
from ..logging import LogContext, get_logger, log_event
from ..models import Budget, MessageLike
from ..registry import get_context_window, get_model_family
from ..tokens import get_token_counter

_logger = get_logger("crux_context.budget")


def resolve_reserved(reserved_for_response: Any) -> int:
    """Return the effective response reservation; never raises.

    ``None`` means the configured default, and so does a value ``int()``
    cannot convert (logged at debug level). Negative values count as 0.
    """
    if reserved_for_response is None:
        return get_settings().reserved_for_response
    try:
        reserved = int(reserved_for_response)
    except (TypeError, ValueError, OverflowError):
        reserved = get_settings().reserved_for_response
        log_event(
            _logger,
            "budget.invalid_reservation",
            level=logging.DEBUG,
            value=repr(reserved_for_response),
            fallback=reserved,
        )
    return max(0, reserved)


def calculate_budget(
    model: str,
    messages: Iterable[MessageLike],
    reserved_for_response: Optional[int] = None,
) -> Budget:
    """Compute the token budget for ``messages`` on ``model``.

    Args:
        model: Model identifier; unknown ids use the default window.
        messages: Conversation as :class:`Message` objects or role/content mappings.
        reserved_for_response: Tokens kept free for the reply. ``None`` uses
            the configured default (1000 unless overridden). Values
            ``int()`` cannot convert fall back to the same default.

    Returns:
        Budget: ``remaining`` is not clamped; a negative value means the
        conversation already exceeds the budget and should be trimmed.
    """
    reserved = resolve_reserved(reserved_for_response)
    total = max(0, get_context_window(model) - reserved)
    used = get_token_counter(model).count_messages(messages)
    remaining = total - used
    percent_used = used / total * 100 if total > 0 else 100.0

    if remaining < 0:
        log_event(
            _logger,
            "budget.exceeded",
            LogContext(model=model, family=get_model_family(model).value),
            level=logging.DEBUG,
            total=total,
            used=used,
            reserved=reserved,
        )
    return Budget(total=total, used=used, remaining=remaining, percent_used=percent_used)


def fits_budget(
    model: str,
    messages: Iterable[MessageLike],
    reserved_for_response: Optional[int] = None,
) -> bool:
    """Return True when ``messages`` fit in ``model``'s budget."""
    return calculate_budget(model, messages, reserved_for_response).remaining >= 0


__all__ = ["calculate_budget", "fits_budget", "resolve_reserved"]
