"""Unit tests for model family classification and the context-window table."""

from __future__ import annotations

import pytest

from crux_context import (
    MODEL_CONTEXT_WINDOWS,
    ModelFamily,
    get_context_window,
    get_model_family,
    list_supported_models,
)


@pytest.mark.parametrize(
    "model_id, expected",
    [
        ("gpt-4", ModelFamily.GPT_4),
        ("gpt-4-turbo", ModelFamily.GPT_4),
        ("gpt-4o", ModelFamily.GPT_4),
        ("gpt-4-32k", ModelFamily.GPT_4),
        ("gpt-3.5-turbo", ModelFamily.GPT_35),
        ("gpt-3.5-turbo-16k", ModelFamily.GPT_35),
        ("claude-3-opus", ModelFamily.CLAUDE),
        ("claude-2.1", ModelFamily.CLAUDE),
        ("gemini-pro", ModelFamily.GEMINI),
        ("gemini-1.5-pro", ModelFamily.GEMINI),
        ("palm-2", ModelFamily.GEMINI),
        ("some-unknown-model", ModelFamily.UNKNOWN),
    ],
)
def test_get_model_family_known_ids(model_id: str, expected: ModelFamily) -> None:
    assert get_model_family(model_id) is expected


def test_get_model_family_is_case_insensitive() -> None:
    assert get_model_family("GPT-4-TURBO") is ModelFamily.GPT_4
    assert get_model_family("  Claude-3-Opus ") is ModelFamily.CLAUDE
    assert get_model_family("Gemini-1.5-Flash") is ModelFamily.GEMINI


def test_get_model_family_degenerate_input_is_unknown() -> None:
    assert get_model_family("") is ModelFamily.UNKNOWN
    assert get_model_family(None) is ModelFamily.UNKNOWN
    assert get_model_family(42) is ModelFamily.UNKNOWN


def test_get_model_family_accepts_family_values() -> None:
    assert get_model_family(ModelFamily.CLAUDE) is ModelFamily.CLAUDE
    assert get_model_family("gpt-3.5") is ModelFamily.GPT_35
    # str enum compares equal to its wire value
    assert get_model_family("gpt-4o") == "gpt-4"


@pytest.mark.parametrize(
    "model_id, window",
    [
        ("gpt-4", 8192),
        ("gpt-4-turbo", 128000),
        ("claude-3-opus", 200000),
        ("gemini-1.5-pro", 1000000),
        ("gpt-3.5-turbo", 16385),
        ("GPT-4-TURBO", 128000),
    ],
)
def test_get_context_window_known_models(model_id: str, window: int) -> None:
    assert get_context_window(model_id) == window


def test_get_context_window_unknown_defaults() -> None:
    assert get_context_window("unknown-model") == 8192
    assert get_context_window("") == 8192
    # known family, unlisted id: no partial matching
    assert get_context_window("gpt-4-0613") == 8192


def test_context_window_table_entries_and_ranges() -> None:
    for model in ("gpt-4", "gpt-4-turbo", "claude-3-opus", "gemini-pro"):
        assert model in MODEL_CONTEXT_WINDOWS
    for model, size in MODEL_CONTEXT_WINDOWS.items():
        assert 1000 < size <= 2_000_000, model


def test_context_window_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        MODEL_CONTEXT_WINDOWS["my-model"] = 1234  # type: ignore[index]
    assert "my-model" not in MODEL_CONTEXT_WINDOWS


def test_list_supported_models_filters_by_family() -> None:
    assert list_supported_models() == sorted(MODEL_CONTEXT_WINDOWS)
    claude = list_supported_models("claude")
    assert claude and all("claude" in m for m in claude)
    gemini = list_supported_models(ModelFamily.GEMINI)
    assert gemini == sorted(m for m in MODEL_CONTEXT_WINDOWS if m.startswith("gemini"))
    assert list_supported_models(ModelFamily.UNKNOWN) == []
