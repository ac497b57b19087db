"""Tests for structured logging setup."""

import json

import structlog

from taskforce import LoggingSettings, get_logger, setup_logging
from taskforce.observability import bind_cycle_context, clear_cycle_context


def test_json_output_carries_cycle_context(capsys):
    setup_logging(LoggingSettings(level="INFO", format="json", service_name="test-colony"))
    logger = get_logger("taskforce.test")

    bind_cycle_context("W1N1", 42)
    logger.info("task.assigned", agent="worker-1")
    clear_cycle_context()

    line = capsys.readouterr().out.strip().splitlines()[-1]
    entry = json.loads(line)
    assert entry["event"] == "task.assigned"
    assert entry["zone"] == "W1N1"
    assert entry["tick"] == 42
    assert entry["service"] == "test-colony"

    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def test_level_filters_debug(capsys):
    setup_logging(LoggingSettings(level="WARNING", format="json"))
    get_logger("taskforce.test").info("hidden")

    assert "hidden" not in capsys.readouterr().out

    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
