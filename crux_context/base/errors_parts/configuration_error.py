"""
Configuration error raised for invalid truncation settings.

A caller bug rather than a runtime condition: never retryable and never
recovered inside this package.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .context_error import ContextError
from .error_code import ErrorCode


@dataclass
class ConfigurationError(ContextError):
    """Invalid configuration supplied by the caller."""

    code: ErrorCode = ErrorCode.INVALID_CONFIGURATION
    message: str = "invalid configuration"
    operation: Optional[str] = "configuration"
    retryable: bool = False

    @classmethod
    def invalid_option(
        cls, option: str, reason: str, *, raw: Optional[Exception] = None
    ) -> "ConfigurationError":
        """Build an error for a single rejected option.

        Args:
            option: Name of the offending option (e.g., ``"strategy"``).
            reason: Short explanation of why the value was rejected.
            raw: Optional underlying exception (e.g., a pydantic error).
        """
        return cls(message=f'Invalid configuration option "{option}": {reason}', raw=raw)


__all__ = ["ConfigurationError"]
