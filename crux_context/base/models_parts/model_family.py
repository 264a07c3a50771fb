"""
Model family enumeration.

A family is a coarse classification of a model identifier used to pick a
token-counting heuristic. It is derived from the identifier, never stored.
"""
from __future__ import annotations

from enum import Enum


class ModelFamily(str, Enum):
    """Known model families; ``UNKNOWN`` when no pattern matches."""

    GPT_4 = "gpt-4"
    GPT_35 = "gpt-3.5"
    CLAUDE = "claude"
    GEMINI = "gemini"
    UNKNOWN = "unknown"


__all__ = ["ModelFamily"]
