"""Unit coverage for structured logging utilities and budgeting events."""

from __future__ import annotations

import json
import logging
import sys
from logging.handlers import RotatingFileHandler

from crux_context import calculate_budget, truncate_to_tokens
from crux_context.base.log_support import JsonFormatter
from crux_context.base.logging import LogContext, configure_logger, get_logger, log_event


def _events(err: str) -> list:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


def _rotating_handlers(logger: logging.Logger) -> list:
    # pytest attaches its own handlers (some are FileHandlers) to the logger
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("CRUX_CONTEXT_LOG_LEVEL", "ERROR")
    logger = get_logger(name="context.test", json_mode=True, level=logging.DEBUG)
    logger.info("hello")
    assert capsys.readouterr().err == ""  # nosec B101 - asserts are appropriate in unit tests
    logger.error("fail")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["level"] == "ERROR"  # nosec B101 - asserts are appropriate in unit tests
    assert data["logger"] == "crux_context.context.test"  # nosec B101


def test_log_event_prunes_none_and_merges_context(capsys):
    logger = get_logger(name="context.events")
    log_event(
        logger,
        "budget.exceeded",
        LogContext(model="gpt-4", family="gpt-4", extra={"reserved": 1000, "note": None}),
        used=9000,
        total=7192,
        hint=None,
    )
    (data,) = _events(capsys.readouterr().err)
    assert data["event"] == "budget.exceeded"  # nosec B101
    assert data["model"] == "gpt-4"  # nosec B101
    assert data["reserved"] == 1000  # nosec B101
    assert "hint" not in data and "note" not in data  # nosec B101 - None values dropped


def test_log_event_keep_none(capsys):
    logger = get_logger(name="context.keep")
    log_event(logger, "registry.lookup", keep_none=True, model=None)
    (data,) = _events(capsys.readouterr().err)
    assert "model" in data and data["model"] is None  # nosec B101
    assert "msg" not in data  # nosec B101 - event keys are merged, not nested


def test_debug_events_are_silent_at_info(capsys):
    get_logger(name="context.quiet")
    truncate_to_tokens("word " * 200, {"max_tokens": 10, "strategy": "end"})
    assert capsys.readouterr().err == ""  # nosec B101 - DEBUG suppressed by default


def test_truncation_and_budget_emit_debug_events(monkeypatch, capsys):
    monkeypatch.setenv("CRUX_CONTEXT_LOG_LEVEL", "DEBUG")
    get_logger(name="context.debug")
    truncate_to_tokens("word " * 200, {"max_tokens": 10, "strategy": "middle"})
    calculate_budget("gpt-4", [{"role": "user", "content": "word " * 10_000}])
    events = {e["event"]: e for e in _events(capsys.readouterr().err)}
    applied = events["truncate.applied"]
    assert applied["strategy"] == "middle"  # nosec B101
    assert applied["final_tokens"] <= 10  # nosec B101
    assert events["budget.exceeded"]["family"] == "gpt-4"  # nosec B101


def test_json_formatter_hoists_json_message() -> None:
    formatter = JsonFormatter()
    record = logging.LogRecord(
        name="crux_context.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"model": "claude-3-opus", "event": "registry.default_window"}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(formatter.format(record))
    assert payload["model"] == "claude-3-opus"  # nosec B101 - validates hoisting
    assert payload["level"] == "INFO"  # nosec B101
    assert "msg" not in payload  # nosec B101


def test_json_formatter_keeps_plain_messages_and_exceptions() -> None:
    formatter = JsonFormatter()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        exc_info = sys.exc_info()
    record = logging.LogRecord(
        name="crux_context.test.plain",
        level=logging.ERROR,
        pathname=__file__,
        lineno=0,
        msg="window %s missing",
        args=("gpt-9",),
        exc_info=exc_info,
    )
    payload = json.loads(formatter.format(record))
    assert payload["msg"] == "window gpt-9 missing"  # nosec B101
    assert "RuntimeError: boom" in payload["exc"]  # nosec B101


def test_configure_logger_file_handler(tmp_path):
    log_path = tmp_path / "logs" / "context.log"
    logger = configure_logger(level="INFO", file_path=str(log_path))
    try:
        log_event(get_logger(name="context.file"), "file.check", answer=42)
        for handler in logger.handlers:
            handler.flush()
        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert any(json.loads(line).get("event") == "file.check" for line in lines)  # nosec B101
        # configuring the same path again reuses the handler
        configure_logger(file_path=str(log_path))
        assert len(_rotating_handlers(logger)) == 1  # nosec B101
    finally:
        configure_logger(file_path=None)
    assert _rotating_handlers(logger) == []  # nosec B101
