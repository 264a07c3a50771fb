"""Token estimation package.

Provides the heuristic and script-aware counters and the cached factory.
"""

from .counter import FAMILY_PROFILES, HeuristicTokenCounter, TokenCounter, looks_like_code
from .unicode_counter import UnicodeTokenCounter
from .factory import get_token_counter

__all__ = [
    "FAMILY_PROFILES",
    "HeuristicTokenCounter",
    "TokenCounter",
    "UnicodeTokenCounter",
    "looks_like_code",
    "get_token_counter",
]
