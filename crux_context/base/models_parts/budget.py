"""
Token budget value object returned by ``calculate_budget``.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Budget:
    """Budget for one model and conversation.

    Attributes:
        total: Context window minus the response reservation, never below 0.
        used: Estimated tokens consumed by the conversation.
        remaining: ``total - used``; negative when the conversation already
            exceeds the budget.
        percent_used: ``used / total * 100``, or ``100.0`` when ``total`` is 0.
    """

    total: int
    used: int
    remaining: int
    percent_used: float

    @property
    def exceeded(self) -> bool:
        """True when the conversation does not fit in the budget."""
        return self.remaining < 0


__all__ = ["Budget"]
