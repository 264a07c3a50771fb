"""
Context-layer domain models public surface.

This module re-exports the one-class-per-file implementations under
``crux_context.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.model_family import ModelFamily
from .models_parts.message import Message, MessageLike, message_role, message_text
from .models_parts.budget import Budget
from .models_parts.truncation_strategy import TruncationStrategy
from .models_parts.truncation_options import TruncationOptions
from .models_parts.truncation_result import TruncationResult

__all__ = [
    "ModelFamily",
    "Message",
    "MessageLike",
    "message_role",
    "message_text",
    "Budget",
    "TruncationStrategy",
    "TruncationOptions",
    "TruncationResult",
]
