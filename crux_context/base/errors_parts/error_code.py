"""
Normalized context error codes (taxonomy).

Defines the `ErrorCode` enumeration raised by the context budgeting layer.
Values are lowercase snake_case and are considered a stable public contract
for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    INVALID_CONFIGURATION = "invalid_configuration"
    VALIDATION = "validation"
    INTERNAL = "internal"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
