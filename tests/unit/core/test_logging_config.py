# tests/unit/core/test_logging_config.py

import io
import json
import logging
import sys

import pytest

from vwo_e2e.core import logging_config
from vwo_e2e.core.logging_config import (
    ContextAdapter,
    JsonFormatter,
    TextFormatter,
    get_logger,
    log_page_action,
    log_step,
    setup_logging,
)


def make_record(message="hello", level=logging.INFO, **extra):
    record = logging.LogRecord("vwo_e2e.test", level, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# --- Pytest Fixtures ---

@pytest.fixture
def restore_root_logger():
    # setup_logging mutates the shared vwo_e2e logger, put it back afterwards
    logger = logging.getLogger(logging_config.ROOT_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


# --- Formatters ---

def test_text_formatter_layout():
    line = TextFormatter().format(make_record("Attempt 1/3 failed: boom", logging.WARNING, context="ApiHelper"))

    timestamp, level, rest = line.split(" | ")
    assert level == "WARNING"
    assert rest == "[ApiHelper] Attempt 1/3 failed: boom"
    assert "T" in timestamp


def test_text_formatter_pads_short_levels_and_omits_missing_context():
    line = TextFormatter().format(make_record("hi"))

    assert " | INFO  |  hi" in line


def test_json_formatter_fields():
    record = make_record("payload", context="AuthApi", extra_context={"user": "a@b.c"})

    data = json.loads(JsonFormatter().format(record))

    assert data["message"] == "payload"
    assert data["level"] == "INFO"
    assert data["context"] == "AuthApi"
    assert data["user"] == "a@b.c"
    assert data["module"] == "vwo_e2e.test"


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = logging.LogRecord("vwo_e2e.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    data = json.loads(JsonFormatter().format(record))

    assert "ValueError: bad" in data["exc_info"]


# --- Loggers and helpers ---

def test_get_logger_is_namespaced():
    assert get_logger("pages").name == "vwo_e2e.pages"
    assert get_logger("vwo_e2e.api").name == "vwo_e2e.api"


def test_context_adapter_binds_label(caplog):
    adapter = get_logger("adapter", context="LoginPage")
    assert isinstance(adapter, ContextAdapter)

    with caplog.at_level(logging.INFO, logger="vwo_e2e.adapter"):
        adapter.info("bound")
        adapter.info("override", extra={"context": "Other"})

    assert [r.context for r in caplog.records] == ["LoginPage", "Other"]


def test_log_step_and_page_action(caplog):
    logger = logging.getLogger("tests.logging")

    with caplog.at_level(logging.DEBUG, logger="tests.logging"):
        log_step(logger, 3, "Click Sign In button", context="LoginModule")
        log_page_action(logger, "Click", "Sign In Button")

    assert [r.getMessage() for r in caplog.records] == ["Step 3: Click Sign In button", "Click -> Sign In Button"]
    assert [r.levelno for r in caplog.records] == [logging.INFO, logging.DEBUG]
    assert caplog.records[0].context == "LoginModule"


# --- setup_logging ---

def test_setup_logging_text(restore_root_logger):
    stream = io.StringIO()

    logger = setup_logging(level="warn", fmt="text", stream=stream)
    logger.info("hidden")
    logger.warning("shown", extra={"context": "WaitHelper"})

    assert logger.level == logging.WARNING
    assert "hidden" not in stream.getvalue()
    assert "| WARNING | [WaitHelper] shown" in stream.getvalue()


def test_setup_logging_json_from_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "json")
    stream = io.StringIO()

    logger = setup_logging(stream=stream)
    logger.debug("structured")

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert lines[-1]["message"] == "structured"


def test_setup_logging_does_not_duplicate_handlers(restore_root_logger):
    setup_logging(level="INFO", stream=io.StringIO())
    logger = setup_logging(level="INFO", stream=io.StringIO())

    assert len(logger.handlers) == 1
