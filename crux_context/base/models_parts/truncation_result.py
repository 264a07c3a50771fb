"""
Result of ``truncate_to_tokens``.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TruncationResult:
    """Outcome of a truncation request.

    Attributes:
        text: The input unchanged when ``truncated`` is False, otherwise the
            shortened text including the indicator.
        truncated: Whether any content was dropped.
        original_tokens: Estimated tokens of the input.
        final_tokens: Estimated tokens of ``text``.
    """

    text: str
    truncated: bool
    original_tokens: int
    final_tokens: int


__all__ = ["TruncationResult"]
