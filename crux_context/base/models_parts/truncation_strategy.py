"""
Truncation strategy enumeration.
"""
from __future__ import annotations

from enum import Enum


class TruncationStrategy(str, Enum):
    """Which part of oversized text is discarded.

    ``END`` keeps a prefix, ``MIDDLE`` keeps a prefix and a suffix, and
    ``SMART`` keeps a prefix ending on a sentence boundary when one is near.
    """

    END = "end"
    MIDDLE = "middle"
    SMART = "smart"


__all__ = ["TruncationStrategy"]
