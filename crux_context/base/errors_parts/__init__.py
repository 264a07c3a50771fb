"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `crux_context.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .context_error import ContextError
from .configuration_error import ConfigurationError

__all__ = ["ErrorCode", "ContextError", "ConfigurationError"]
