"""Heuristic token counter.

Estimates tokens without a vendor tokenizer. The estimate is the larger of a
character-based figure (``len / chars_per_token``) and a structural one built
from word, symbol, digit-run and non-ASCII densities, scaled up when the text
looks like source code. Symbol-dense text therefore costs more than prose of
the same length, which is how real BPE tokenizers behave.

Every term only grows when characters are added at either end of the text,
so ``count`` is monotone over prefixes and suffixes. The truncation engine's
binary searches rely on that.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Protocol, Tuple, runtime_checkable

from ..models import MessageLike, ModelFamily, message_text

# family -> (chars_per_token, per-message overhead)
FAMILY_PROFILES: Mapping[ModelFamily, Tuple[float, int]] = MappingProxyType(
    {
        ModelFamily.GPT_4: (3.5, 4),  # <|im_start|>{role}\n ... <|im_end|>
        ModelFamily.GPT_35: (3.5, 4),
        ModelFamily.CLAUDE: (3.8, 3),
        ModelFamily.GEMINI: (4.0, 2),
        ModelFamily.UNKNOWN: (4.0, 4),
    }
)

TOKENS_PER_WORD = 1.3
TOKENS_PER_SYMBOL = 0.5
TOKENS_PER_NON_ASCII = 0.5
CODE_MULTIPLIER = 1.2

_WORD_RE = re.compile(r"\S+")
_SYMBOL_RE = re.compile(r"[^\w\s]")
_DIGIT_RUN_RE = re.compile(r"\d+")
# Unanchored: a match inside a substring stays a match in any longer text
# containing it.
_CODE_INDICATORS = tuple(
    re.compile(p)
    for p in (
        r"function\s+\w+\s*\(",
        r"def\s+\w+\s*\(",
        r"const\s+\w+\s*=",
        r"let\s+\w+\s*=",
        r"import\s+.*from",
        r"class\s+\w+",
        r"=>",
        r"\{\s*\n",
        r"\[\s*\n",
    )
)


@runtime_checkable
class TokenCounter(Protocol):
    """Anything that can estimate tokens for text and conversations."""

    def count(self, text: str) -> int: ...

    def count_messages(self, messages: Iterable[MessageLike]) -> int: ...


def _as_text(text: Any) -> str:
    if text is None:
        return ""
    return text if isinstance(text, str) else str(text)


def looks_like_code(text: str) -> bool:
    """Return True when ``text`` contains a common source-code construct."""
    return any(p.search(text) for p in _CODE_INDICATORS)


@dataclass(frozen=True)
class HeuristicTokenCounter:
    """Family-tuned heuristic counter.

    Instances are immutable and safe to share; obtain them through
    :func:`crux_context.base.tokens.get_token_counter`.
    """

    family: ModelFamily = ModelFamily.UNKNOWN
    chars_per_token: float = 4.0
    message_overhead: int = 4

    @classmethod
    def for_family(cls, family: ModelFamily) -> "HeuristicTokenCounter":
        chars_per_token, overhead = FAMILY_PROFILES[family]
        return cls(family=family, chars_per_token=chars_per_token, message_overhead=overhead)

    def count(self, text: str) -> int:
        """Estimate tokens in ``text``; 0 for empty input, never raises."""
        text = _as_text(text)
        if not text:
            return 0
        words = sum(1 for _ in _WORD_RE.finditer(text))
        symbols = sum(1 for _ in _SYMBOL_RE.finditer(text))
        digit_tokens = sum(math.ceil(len(m.group()) / 2) for m in _DIGIT_RUN_RE.finditer(text))
        non_ascii = sum(1 for ch in text if ord(ch) > 127)

        structural = (
            words * TOKENS_PER_WORD
            + symbols * TOKENS_PER_SYMBOL
            + digit_tokens
            + non_ascii * TOKENS_PER_NON_ASCII
        )
        if looks_like_code(text):
            structural *= CODE_MULTIPLIER
        by_chars = len(text) / self.chars_per_token
        # round() absorbs float noise such as 10 * 1.3 == 13.000000000000002
        return math.ceil(round(max(structural, by_chars), 6))

    def count_messages(self, messages: Iterable[MessageLike]) -> int:
        """Estimate tokens for a conversation.

        Sum of content tokens plus ``message_overhead`` per message for the
        chat-format wrapping. An empty conversation costs 0.
        """
        total = 0
        for msg in messages or ():
            total += self.message_overhead + self.count(message_text(msg))
        return total


__all__ = [
    "FAMILY_PROFILES",
    "TokenCounter",
    "HeuristicTokenCounter",
    "looks_like_code",
]
