"""
Structured context error exception type.

Carries a normalized `ErrorCode`, a human-readable message and a retry hint
so callers can branch on ``code`` instead of parsing messages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ContextError(Exception):
    """Represents a structured context-layer error with a normalized code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        operation: Operation that failed (e.g., ``"truncate"``).
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    operation: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining operation, code, and message."""
        return f"{self.operation or '-'} {self.code.value}: {self.message}"


__all__ = ["ContextError"]
