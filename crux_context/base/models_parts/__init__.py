"""Value types for the context layer, one class per file."""

from .model_family import ModelFamily
from .message import Message, MessageLike, message_role, message_text
from .budget import Budget
from .truncation_strategy import TruncationStrategy
from .truncation_options import TruncationOptions
from .truncation_result import TruncationResult

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
