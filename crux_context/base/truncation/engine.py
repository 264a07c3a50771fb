"""Truncation engine.

Shrinks text to a token ceiling with one of three strategies:

``end``
    Keep the longest prefix that fits together with the indicator, cut on a
    word boundary when one is close.
``middle``
    Keep a prefix and a suffix sized by ``preserve_start``/``preserve_end``
    and splice the indicator between them.
``smart``
    Like ``end``, but back up to the nearest sentence end within a bounded
    look-back window.

Invariants
----------
* Text that already fits is returned unchanged, without an indicator.
* Whenever ``truncated`` is True and ``max_tokens > 0``, ``final_tokens <= max_tokens``.
  Every candidate is measured with the same counter before it is accepted.
* ``max_tokens <= 0`` returns the indicator alone.
* An indicator that alone exceeds a positive ``max_tokens`` is dropped.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Mapping, Optional, Union

from ...config import get_settings
from ...config.defaults import (
    MIDDLE_SEPARATOR,
    SMART_LOOKBACK_CHARS,
    SMART_SEPARATOR,
    WORD_BOUNDARY_WINDOW,
)
from ..errors import ConfigurationError
from ..logging import LogContext, get_logger, log_event
from ..models import TruncationOptions, TruncationResult, TruncationStrategy
from ..tokens import TokenCounter, get_token_counter
from .search import (
    earliest_suffix_start,
    find_sentence_end,
    longest_prefix,
    snap_prefix_to_word,
    snap_suffix_to_word,
)

_logger = get_logger("crux_context.truncation")

OptionsLike = Union[TruncationOptions, Mapping[str, Any]]

_INDICATOR_KEYS = ("truncation_indicator", "truncationIndicator")


def coerce_options(options: OptionsLike) -> TruncationOptions:
    """Validate ``options`` into :class:`TruncationOptions`.

    Mappings missing an indicator or model pick them up from the configured
    settings. Raises :class:`ConfigurationError` for anything invalid.
    """
    if isinstance(options, TruncationOptions):
        return options
    if not isinstance(options, Mapping):
        raise ConfigurationError.invalid_option(
            "options", f"expected TruncationOptions or a mapping, got {type(options).__name__}"
        )
    data: Dict[str, Any] = dict(options)
    settings = get_settings()
    if not any(k in data for k in _INDICATOR_KEYS):
        data["truncation_indicator"] = settings.truncation_indicator
    data.setdefault("model", settings.default_model)
    return TruncationOptions.model_validate(data)


def _affordable(marker: str, max_tokens: int, counter: TokenCounter) -> str:
    return marker if counter.count(marker) <= max_tokens else ""


def _prefix_builder(text: str, marker: str) -> Callable[[int], str]:
    """Return a builder for ``prefix + marker`` candidates of a given length."""

    def build(n: int) -> str:
        return text[:n].rstrip() + marker

    return build


def _truncate_end(text: str, opts: TruncationOptions, counter: TokenCounter) -> str:
    max_tokens = opts.max_tokens
    marker = _affordable(opts.truncation_indicator, max_tokens, counter)
    build = _prefix_builder(text, marker)
    cut = longest_prefix(len(text), lambda n: counter.count(build(n)) <= max_tokens)
    snapped = snap_prefix_to_word(text, cut, WORD_BOUNDARY_WINDOW)
    if snapped != cut and counter.count(build(snapped)) <= max_tokens:
        cut = snapped
    return build(cut)


def _truncate_smart(text: str, opts: TruncationOptions, counter: TokenCounter) -> str:
    max_tokens = opts.max_tokens
    indicator = opts.truncation_indicator
    marker = _affordable(SMART_SEPARATOR + indicator if indicator else "", max_tokens, counter)
    build = _prefix_builder(text, marker)
    cut = longest_prefix(len(text), lambda n: counter.count(build(n)) <= max_tokens)
    boundary = find_sentence_end(text, cut, SMART_LOOKBACK_CHARS)
    if boundary is not None and counter.count(build(boundary)) <= max_tokens:
        return build(boundary)
    snapped = snap_prefix_to_word(text, cut, WORD_BOUNDARY_WINDOW)
    if snapped != cut and counter.count(build(snapped)) <= max_tokens:
        cut = snapped
    return build(cut)


def _split_targets(available: int, preserve_start: Optional[int], preserve_end: Optional[int]) -> tuple[int, int]:
    """Resolve prefix/suffix token targets within ``available``.

    Missing values take what the other leaves (an even split when both are
    missing). If the pair exceeds ``available`` both shrink, keeping their ratio.
    """
    if preserve_start is None and preserve_end is None:
        start = available // 2
        return start, available - start
    if preserve_start is None:
        preserve_start = max(0, available - preserve_end)
    if preserve_end is None:
        preserve_end = max(0, available - preserve_start)
    requested = preserve_start + preserve_end
    if requested > available:
        preserve_start = preserve_start * available // requested
        preserve_end = preserve_end * available // requested
    return preserve_start, preserve_end


def _prefix_within(text: str, target: int, counter: TokenCounter) -> int:
    cut = longest_prefix(len(text), lambda n: counter.count(text[:n]) <= target)
    return snap_prefix_to_word(text, cut, WORD_BOUNDARY_WINDOW)


def _suffix_within(text: str, target: int, counter: TokenCounter, min_start: int) -> int:
    start = earliest_suffix_start(len(text), lambda s: counter.count(text[s:]) <= target, min_start=min_start)
    return snap_suffix_to_word(text, start, WORD_BOUNDARY_WINDOW)


def _truncate_middle(text: str, opts: TruncationOptions, counter: TokenCounter) -> str:
    max_tokens = opts.max_tokens
    indicator = opts.truncation_indicator
    marker = _affordable(
        f"{MIDDLE_SEPARATOR}{indicator}{MIDDLE_SEPARATOR}" if indicator else MIDDLE_SEPARATOR,
        max_tokens,
        counter,
    )
    available = max(0, max_tokens - counter.count(marker))
    start_target, end_target = _split_targets(available, opts.preserve_start, opts.preserve_end)

    while True:
        cut = _prefix_within(text, start_target, counter)
        start = _suffix_within(text, end_target, counter, min_start=cut)
        candidate = text[:cut].rstrip() + marker + text[start:].lstrip()
        final = counter.count(candidate)
        if final <= max_tokens or start_target + end_target == 0:
            return candidate
        # The estimate is not strictly additive across the splice; shrink
        # both sides in proportion to the overshoot and retry.
        overshoot = final - max_tokens
        targets = start_target + end_target
        shrink_start = min(start_target, math.ceil(overshoot * start_target / targets))
        shrink_end = min(end_target, max(0, overshoot - shrink_start))
        start_target -= shrink_start
        end_target -= shrink_end


_STRATEGIES: Dict[TruncationStrategy, Callable[[str, TruncationOptions, TokenCounter], str]] = {
    TruncationStrategy.END: _truncate_end,
    TruncationStrategy.MIDDLE: _truncate_middle,
    TruncationStrategy.SMART: _truncate_smart,
}


def truncate_to_tokens(
    text: str,
    options: OptionsLike,
    *,
    counter: Optional[TokenCounter] = None,
) -> TruncationResult:
    """Truncate ``text`` to fit ``options.max_tokens``.

    Args:
        text: Input text. Returned as-is when it already fits.
        options: :class:`TruncationOptions` or an equivalent mapping
            (snake_case or camelCase keys).
        counter: Optional counter override; defaults to the counter of
            ``options.model``.

    Returns:
        TruncationResult with token counts measured by the same counter.

    Raises:
        ConfigurationError: Unknown strategy or invalid option values.
    """
    opts = coerce_options(options)
    counter = counter or get_token_counter(opts.model)
    original = counter.count(text)
    if original <= opts.max_tokens:
        return TruncationResult(text=text, truncated=False, original_tokens=original, final_tokens=original)

    if opts.max_tokens <= 0:
        result = opts.truncation_indicator
    else:
        handler = _STRATEGIES.get(opts.strategy)
        if handler is None:
            raise ConfigurationError.invalid_option("strategy", f"unsupported strategy {opts.strategy!r}")
        result = handler(text, opts, counter)

    final = counter.count(result)
    log_event(
        _logger,
        "truncate.applied",
        LogContext(model=opts.model, strategy=opts.strategy.value),
        level=logging.DEBUG,
        max_tokens=opts.max_tokens,
        original_tokens=original,
        final_tokens=final,
        original_chars=len(text),
        final_chars=len(result),
    )
    return TruncationResult(text=result, truncated=True, original_tokens=original, final_tokens=final)


__all__ = ["OptionsLike", "coerce_options", "truncate_to_tokens"]
