# vwo_e2e/core/logging_config.py

import logging
import sys
import json
import os
from datetime import datetime

ROOT_LOGGER_NAME = "vwo_e2e"

LOG_FORMAT_JSON = "json"
LOG_FORMAT_TEXT = "text"


def _record_timestamp(record: logging.LogRecord) -> str:
    return datetime.fromtimestamp(record.created).astimezone().isoformat()


class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for logging."""
    def format(self, record):
        log_record = {
            "timestamp": _record_timestamp(record),
            "level": record.levelname,
            "message": record.getMessage(),
            # Source location
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
            "process": record.process,
            "thread": record.thread,
            "threadName": record.threadName,
        }

        # Context label set by the emitting component (ApiHelper, WaitHelper, LoginPage...)
        context = getattr(record, "context", None)
        if context:
            log_record["context"] = context

        # logger.info("message", extra={'extra_context': {'key1': 'value1'}})
        if hasattr(record, 'extra_context') and isinstance(record.extra_context, dict):
            log_record.update(record.extra_context)

        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_record['stack_info'] = self.formatStack(record.stack_info)

        return json.dumps(log_record, default=str)


class TextFormatter(logging.Formatter):
    """Console formatter: `timestamp | LEVEL | [context] message`."""
    def format(self, record):
        context = getattr(record, "context", None)
        context_str = f"[{context}]" if context else ""
        line = f"{_record_timestamp(record)} | {record.levelname:<5} | {context_str} {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class ContextAdapter(logging.LoggerAdapter):
    """Binds a context label to every record logged through it."""

    def __init__(self, logger: logging.Logger, context: str):
        super().__init__(logger, {"context": context})

    def process(self, msg, kwargs):
        extra = kwargs.get("extra") or {}
        # Explicit per-call context wins over the bound one
        kwargs["extra"] = {**self.extra, **extra}
        return msg, kwargs


def get_logger(name: str, context: str | None = None):
    """Returns a logger under the suite's root logger, optionally bound to a context label."""
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if context:
        return ContextAdapter(logger, context)
    return logger


def log_step(logger, step_number: int, description: str, context: str | None = None):
    """Logs a numbered business step at INFO level."""
    extra = {"context": context} if context else None
    logger.info(f"Step {step_number}: {description}", extra=extra)


def log_page_action(logger, action: str, element: str, context: str | None = None):
    """Logs a single UI action at DEBUG level."""
    extra = {"context": context} if context else None
    logger.debug(f"{action} -> {element}", extra=extra)


def setup_logging(level: str | None = None, fmt: str | None = None, stream=None) -> logging.Logger:
    """Configures the suite's root logger with a console handler."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Configure logging level and format (from environment variables, default INFO / text)
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    # WARN is accepted as an alias
    if log_level == "WARN":
        log_level = "WARNING"
    log_format = (fmt or os.getenv("LOG_FORMAT", LOG_FORMAT_TEXT)).lower()

    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicate logs
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)

    if log_format == LOG_FORMAT_JSON:
        console_handler.setFormatter(JsonFormatter())
    else:
        console_handler.setFormatter(TextFormatter())

    logger.addHandler(console_handler)

    logger.debug("Logging configured", extra={"context": "logging_config"})
    return logger
