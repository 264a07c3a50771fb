"""crux_context.config.defaults
============================

Central place for the default values used across the crux_context package.
Every fallback applied by the registry, counter, budget calculator and
truncation engine is named here; call sites never embed magic literals.

This module imports nothing from other crux_context packages, so any module
can depend on it. Only plain constants live here.
"""

from __future__ import annotations

# ---- Model registry ----
# Context window returned for model ids missing from the table.
DEFAULT_CONTEXT_WINDOW = 8192

# ---- Budget calculator ----
# Tokens held back for the model's response when the caller does not say.
DEFAULT_RESERVED_FOR_RESPONSE = 1000

# ---- Truncation engine ----
DEFAULT_TRUNCATION_INDICATOR = "..."
# Model whose counter measures truncation progress when options name none.
DEFAULT_TRUNCATION_MODEL = "gpt-4"
# How far (characters) an "end" cut may move back to land on whitespace.
WORD_BOUNDARY_WINDOW = 50
# How far (characters) a "smart" cut may search back for a sentence end.
SMART_LOOKBACK_CHARS = 500
# Glue placed around the indicator by the middle and smart strategies.
MIDDLE_SEPARATOR = "\n"
SMART_SEPARATOR = " "


__all__ = [
    "DEFAULT_CONTEXT_WINDOW",
    "DEFAULT_RESERVED_FOR_RESPONSE",
    "DEFAULT_TRUNCATION_INDICATOR",
    "DEFAULT_TRUNCATION_MODEL",
    "WORD_BOUNDARY_WINDOW",
    "SMART_LOOKBACK_CHARS",
    "MIDDLE_SEPARATOR",
    "SMART_SEPARATOR",
]
