"""crux_context package

Context-window budgeting for LLM conversations.

Purpose:
    Estimate how many tokens a conversation costs on a given model, report
    how much of the model's window remains once room for the response is
    held back, and shrink text or conversations that do not fit. Everything
    is computed locally from a static model table and heuristic counters;
    no tokenizer download or network access is involved.

Public API (re-exported):
    - Version: ``__version__``
    - Registry: :func:`get_model_family`, :func:`get_context_window`,
      :func:`list_supported_models`, ``MODEL_CONTEXT_WINDOWS``
    - Counting: :func:`get_token_counter`, :class:`TokenCounter`,
      :class:`HeuristicTokenCounter`, :class:`UnicodeTokenCounter`
    - Budgeting: :func:`calculate_budget`, :func:`fits_budget`,
      :func:`prune_messages`
    - Truncation: :func:`truncate_to_tokens`, :class:`TruncationOptions`,
      :class:`TruncationStrategy`, :class:`TruncationResult`
    - Errors: :class:`ContextError`, :class:`ConfigurationError`, :class:`ErrorCode`
    - Settings: :func:`get_settings`

Example:
    >>> from crux_context import calculate_budget
    >>> budget = calculate_budget("gpt-4", [{"role": "user", "content": "Hello"}])
    >>> budget.total
    7192
"""

from .base.context import calculate_budget, fits_budget, prune_messages
from .base.errors import ConfigurationError, ContextError, ErrorCode
from .base.models import (
    Budget,
    Message,
    ModelFamily,
    TruncationOptions,
    TruncationResult,
    TruncationStrategy,
)
from .base.registry import (
    MODEL_CONTEXT_WINDOWS,
    get_context_window,
    get_model_family,
    list_supported_models,
)
from .base.tokens import (
    HeuristicTokenCounter,
    TokenCounter,
    UnicodeTokenCounter,
    get_token_counter,
)
from .base.truncation import truncate_to_tokens
from .config import get_settings

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "get_model_family",
    "get_context_window",
    "list_supported_models",
    "MODEL_CONTEXT_WINDOWS",
    "get_token_counter",
    "TokenCounter",
    "HeuristicTokenCounter",
    "UnicodeTokenCounter",
    "calculate_budget",
    "fits_budget",
    "prune_messages",
    "truncate_to_tokens",
    "Budget",
    "Message",
    "ModelFamily",
    "TruncationOptions",
    "TruncationResult",
    "TruncationStrategy",
    "ErrorCode",
    "ContextError",
    "ConfigurationError",
    "get_settings",
]
