"""
Message DTO consumed by the counter and budget calculator.

Callers own their messages; nothing in this package mutates them. Any mapping
with ``role`` and ``content`` keys is accepted wherever a `Message` is, and
`message_text` / `message_role` read either shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class Message:
    """A chat message reduced to the two fields budgeting needs.

    Attributes:
        role: Author role (``"system"``, ``"user"``, ``"assistant"``, ...).
        content: Plain text content.
    """

    role: str
    content: str


MessageLike = Union[Message, Mapping[str, Any]]


def message_role(msg: MessageLike) -> str:
    """Return the role of a message or message-shaped mapping ('' if absent)."""
    if isinstance(msg, Mapping):
        return str(msg.get("role") or "")
    return str(getattr(msg, "role", "") or "")


def message_text(msg: MessageLike) -> str:
    """Return the content of a message or message-shaped mapping ('' if absent)."""
    if isinstance(msg, Mapping):
        content = msg.get("content")
    else:
        content = getattr(msg, "content", None)
    if content is None:
        return ""
    return content if isinstance(content, str) else str(content)


__all__ = ["Message", "MessageLike", "message_role", "message_text"]
