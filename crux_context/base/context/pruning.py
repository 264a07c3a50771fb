"""Conversation pruning.

Drops the oldest non-system messages until the conversation fits the model's
budget. System messages are always kept, and surviving messages keep their
original relative order.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..logging import LogContext, get_logger, log_event
from ..models import MessageLike, message_role
from ..registry import get_context_window
from ..tokens import get_token_counter
from .budget import resolve_reserved

_logger = get_logger("crux_context.pruning")


def prune_messages(
    model: str,
    messages: Sequence[MessageLike],
    reserved_for_response: Optional[int] = None,
) -> List[MessageLike]:
    """Return the newest messages that fit, keeping every system message.

    Args:
        model: Target model identifier.
        messages: Conversation in chronological order. Not mutated.
        reserved_for_response: Tokens kept free for the reply (``None`` = configured default).

    Returns:
        A new list. Equal to ``messages`` when everything already fits; only
        the system messages when no other message fits. Never raises.
    """
    counter = get_token_counter(model)
    available = max(0, get_context_window(model) - resolve_reserved(reserved_for_response))
    costs = [counter.count_messages([m]) for m in messages]
    if sum(costs) <= available:
        return list(messages)

    keep = [message_role(m) == "system" for m in messages]
    used = sum(c for c, k in zip(costs, keep) if k)
    for idx in range(len(messages) - 1, -1, -1):
        if keep[idx]:
            continue
        if used + costs[idx] > available:
            break
        keep[idx] = True
        used += costs[idx]

    pruned = [m for m, k in zip(messages, keep) if k]
    log_event(
        _logger,
        "budget.pruned",
        LogContext(model=model),
        level=logging.DEBUG,
        dropped=len(messages) - len(pruned),
        kept=len(pruned),
        used=used,
        available=available,
    )
    return pruned


__all__ = ["prune_messages"]
