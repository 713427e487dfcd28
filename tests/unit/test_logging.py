"""Logging configuration tests."""

import io
import json
import logging
from contextlib import contextmanager

import pytest
import structlog

from core import LogContext, configure_logging, get_logger


@contextmanager
def configured(level, json_logs=False):
    """Configure logging into a buffer, undoing global changes afterwards."""
    root = logging.getLogger()
    handlers, root_level = list(root.handlers), root.level
    stream = io.StringIO()
    try:
        configure_logging(level, json_logs=json_logs, stream=stream)
        yield stream
    finally:
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(root_level)


@pytest.mark.unit
def test_json_logs():
    with configured("DEBUG", json_logs=True) as stream:
        get_logger("aiui.test.json").info("render_started", components=3)

    record = json.loads(stream.getvalue().splitlines()[-1])
    assert record["levelname"] == "INFO"
    assert record["name"] == "aiui.test.json"
    event = json.loads(record["message"])
    assert event["event"] == "render_started"
    assert event["components"] == 3


@pytest.mark.unit
def test_level_filtering():
    with configured("WARNING") as stream:
        logger = get_logger("aiui.test.level")
        logger.info("hidden_event")
        logger.warning("shown_event")

    output = stream.getvalue()
    assert "hidden_event" not in output
    assert "shown_event" in output


@pytest.mark.unit
def test_log_context_binds_and_restores():
    with LogContext(action="outer"):
        assert structlog.contextvars.get_contextvars()["action"] == "outer"
        with LogContext(action="inner", path="0.1"):
            assert structlog.contextvars.get_contextvars() == {"action": "inner", "path": "0.1"}
        assert structlog.contextvars.get_contextvars() == {"action": "outer"}
    assert structlog.contextvars.get_contextvars() == {}
