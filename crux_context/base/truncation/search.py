"""Cut-point search helpers for the truncation engine.

The prefix/suffix searches are binary searches over candidate lengths. They
only ever return a length whose predicate was actually evaluated as true (or
the empty cut), so callers get a verified fit even if the predicate is not
perfectly monotone. Boundary scans are bounded by a fixed window, keeping the
worst case linear in the text length.
"""
from __future__ import annotations

from typing import Callable, Optional

SENTENCE_TERMINALS = frozenset(".!?")


def longest_prefix(length: int, fits: Callable[[int], bool]) -> int:
    """Return the largest ``n`` in ``[0, length]`` with ``fits(n)``; 0 if none.

    ``fits(0)`` is assumed true and never evaluated.
    """
    lo, hi, best = 1, length, 0
    while lo <= hi:
        mid = (lo + hi) // 2
        if fits(mid):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def earliest_suffix_start(length: int, fits: Callable[[int], bool], min_start: int = 0) -> int:
    """Return the smallest ``start`` in ``[min_start, length]`` with ``fits(start)``.

    ``fits(length)`` (the empty suffix) is assumed true and never evaluated.
    """
    lo, hi, best = min_start, length - 1, length
    while lo <= hi:
        mid = (lo + hi) // 2
        if fits(mid):
            best = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return best


def snap_prefix_to_word(text: str, cut: int, window: int) -> int:
    """Move a prefix cut back onto whitespace so no word is split.

    Returns ``cut`` unchanged when it already sits on a word boundary or no
    whitespace exists within ``window`` characters before it.
    """
    if cut <= 0 or cut >= len(text) or text[cut].isspace() or text[cut - 1].isspace():
        return cut
    for i in range(cut - 1, max(0, cut - window), -1):
        if text[i].isspace():
            return i
    return cut


def snap_suffix_to_word(text: str, start: int, window: int) -> int:
    """Move a suffix start forward past whitespace so no word is split."""
    if start <= 0 or start >= len(text) or text[start - 1].isspace() or text[start].isspace():
        return start
    for i in range(start, min(len(text), start + window)):
        if text[i].isspace():
            return i + 1
    return start


def find_sentence_end(text: str, cut: int, lookback: int) -> Optional[int]:
    """Find the nearest sentence end at or before ``cut``.

    A sentence end is ``.``, ``!`` or ``?`` followed by whitespace or by the
    end of the text, so a decimal point just before ``cut`` never counts. At
    most ``lookback`` characters are scanned.

    Returns:
        The index just after the terminal mark, or ``None`` if none was found.
    """
    stop = max(-1, cut - 1 - lookback)
    for i in range(cut - 1, stop, -1):
        if text[i] not in SENTENCE_TERMINALS:
            continue
        nxt = i + 1
        if nxt == len(text) or text[nxt].isspace():
            return nxt
    return None


__all__ = [
    "SENTENCE_TERMINALS",
    "longest_prefix",
    "earliest_suffix_start",
    "snap_prefix_to_word",
    "snap_suffix_to_word",
    "find_sentence_end",
]
