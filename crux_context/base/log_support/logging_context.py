"""Structured logging context object for budgeting events.

Defines :class:`LogContext`, a dataclass carrying the fields shared by most
context events (model, family, strategy) plus an ``extra`` mapping. The
``to_dict`` helper merges ``extra`` and prunes ``None`` values.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for budgeting log events."""

    model: Optional[str] = None
    family: Optional[str] = None
    strategy: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
