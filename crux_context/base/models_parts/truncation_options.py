"""
Validated truncation options.

Purpose
-------
An explicit, frozen Pydantic model whose defaults come from
``crux_context.config.defaults``. Both snake_case field names and the
camelCase spellings used by JSON callers (``maxTokens``,
``preserveStart``, ``preserveEnd``, ``truncationIndicator``) are accepted.

Failure modes
-------------
Any validation failure (unknown strategy, negative preserve counts,
non-integer ``max_tokens``) surfaces as :class:`ConfigurationError`; the
underlying ``pydantic.ValidationError`` is attached as ``raw``.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, model_validator

from ...config.defaults import DEFAULT_TRUNCATION_INDICATOR, DEFAULT_TRUNCATION_MODEL
from ..errors_parts.configuration_error import ConfigurationError
from .truncation_strategy import TruncationStrategy


class TruncationOptions(BaseModel):
    """Constraints for ``truncate_to_tokens``.

    Attributes
    ----------
    max_tokens:
        Token ceiling for the returned text. ``<= 0`` yields the indicator alone.
    strategy:
        One of :class:`TruncationStrategy`; anything else is rejected.
    preserve_start / preserve_end:
        Approximate token targets for the kept prefix/suffix (``middle`` only).
        ``None`` splits the budget evenly.
    truncation_indicator:
        Marker spliced in where content was dropped. ``""`` disables it.
    model:
        Model id (or family) whose counter measures progress.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    max_tokens: int = Field(validation_alias=AliasChoices("max_tokens", "maxTokens"))
    strategy: TruncationStrategy
    preserve_start: Optional[int] = Field(
        default=None, ge=0, validation_alias=AliasChoices("preserve_start", "preserveStart")
    )
    preserve_end: Optional[int] = Field(
        default=None, ge=0, validation_alias=AliasChoices("preserve_end", "preserveEnd")
    )
    truncation_indicator: str = Field(
        default=DEFAULT_TRUNCATION_INDICATOR,
        validation_alias=AliasChoices("truncation_indicator", "truncationIndicator"),
    )
    model: str = DEFAULT_TRUNCATION_MODEL

    @model_validator(mode="wrap")
    @classmethod
    def _as_configuration_error(cls, data: Any, handler: Any) -> "TruncationOptions":
        try:
            return handler(data)
        except ValidationError as exc:
            errors = exc.errors()
            option = str(errors[0]["loc"][0]) if errors and errors[0].get("loc") else "options"
            reason = errors[0]["msg"] if errors else str(exc)
            raise ConfigurationError.invalid_option(option, reason, raw=exc) from exc


__all__ = ["TruncationOptions"]
