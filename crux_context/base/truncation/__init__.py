"""Truncation package.

Fits oversized text into a token budget using the end, middle or smart strategy.
"""

from .engine import OptionsLike, coerce_options, truncate_to_tokens

__all__ = ["OptionsLike", "coerce_options", "truncate_to_tokens"]
