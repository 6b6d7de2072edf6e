"""
Logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console handler and an optional file handler.  Records may carry
structured key/value pairs in a ``fields`` attribute (passed through
``extra={"fields": {...}}``); :class:`KeyValueFormatter` renders them
after the message, e.g.::

    2024-01-01 12:00:00 [INFO] string_service.service: method call method=count input=hello output=5 took=0.000012

Use :func:`with_fields` to bind fields to a logger once and have them
attached to every record it emits.
"""

import logging
from pathlib import Path
from typing import Any, Optional


def _format_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, float):
        return f"{value:.6f}"
    text = str(value)
    if text == "" or any(ch in text for ch in ' "='):
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return text


class KeyValueFormatter(logging.Formatter):
    """Formatter appending ``record.fields`` as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = getattr(record, "fields", None)
        if fields:
            pairs = " ".join(f"{key}={_format_value(value)}" for key, value in fields.items())
            line = f"{line} {pairs}"
        return line


class FieldsAdapter(logging.LoggerAdapter):
    """Logger adapter merging its bound fields into each record.

    Fields given per call through ``extra={"fields": {...}}`` take
    precedence over the bound ones.
    """

    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra["fields"] = {**self.extra, **extra.get("fields", {})}
        return msg, kwargs


def with_fields(logger, **fields: Any) -> FieldsAdapter:
    """Return a logger that attaches ``fields`` to every record.

    Binding onto an existing :class:`FieldsAdapter` extends its fields
    rather than nesting adapters.
    """
    if isinstance(logger, FieldsAdapter):
        fields = {**logger.extra, **fields}
        logger = logger.logger
    return FieldsAdapter(logger, fields)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a
    console handler and optionally a file handler.  The root
    logger's level is set based on the provided ``level``.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured (tests, or create_app called repeatedly).
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = KeyValueFormatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def flush_logging() -> None:
    """Flush every handler attached to the root logger."""
    for handler in logging.getLogger().handlers:
        handler.flush()
