"""Model registry package.

Classifies model identifiers into families and resolves context-window sizes.
"""

from .families import FAMILY_PATTERNS, get_model_family
from .context_windows import MODEL_CONTEXT_WINDOWS, get_context_window, list_supported_models

__all__ = [
    "FAMILY_PATTERNS",
    "get_model_family",
    "MODEL_CONTEXT_WINDOWS",
    "get_context_window",
    "list_supported_models",
]
