"""Model family classification.

Families are matched by case-insensitive substring against an ordered pattern
table. Order matters: more specific families come first so that, for example,
``gpt-4`` is never shadowed by a broader ``gpt-3``/``gpt`` rule.
"""
from __future__ import annotations

from typing import Any, Tuple

from ..models import ModelFamily

# (family, substrings) checked top to bottom; first hit wins.
FAMILY_PATTERNS: Tuple[Tuple[ModelFamily, Tuple[str, ...]], ...] = (
    (ModelFamily.GPT_4, ("gpt-4", "gpt4")),
    (ModelFamily.GPT_35, ("gpt-3.5", "gpt-35", "gpt-3", "gpt3")),
    (ModelFamily.CLAUDE, ("claude",)),
    (ModelFamily.GEMINI, ("gemini", "palm")),
)


def get_model_family(model_id: Any) -> ModelFamily:
    """Classify a model identifier into a :class:`ModelFamily`.

    Total and deterministic: empty, ``None`` or non-string input returns
    ``ModelFamily.UNKNOWN`` instead of raising. A ``ModelFamily`` member is
    returned as-is.
    """
    if isinstance(model_id, ModelFamily):
        return model_id
    if not isinstance(model_id, str) or not model_id:
        return ModelFamily.UNKNOWN
    normalized = model_id.strip().lower()
    for family, patterns in FAMILY_PATTERNS:
        if any(p in normalized for p in patterns):
            return family
    return ModelFamily.UNKNOWN


__all__ = ["FAMILY_PATTERNS", "get_model_family"]
