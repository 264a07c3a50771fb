"""Unified context error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``crux_context.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.context_error import ContextError
from .errors_parts.configuration_error import ConfigurationError

__all__ = ["ErrorCode", "ContextError", "ConfigurationError"]
