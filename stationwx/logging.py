# stationwx/logging.py
"""
Structured logging for stationwx.

Provides JSON-formatted logging with consistent fields:
- timestamp: ISO 8601
- level: DEBUG/INFO/WARNING/ERROR/CRITICAL
- logger: Module name
- message: Log message
- **kwargs: Additional structured fields

Logs go to stderr; stdout is reserved for banners written with `--output -`.

Usage:
    from stationwx.logging import get_logger
    logger = get_logger(__name__)
    logger.info("observation_fetched", station="KGOK")
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO


class StructuredLogFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs each log line as a JSON object with consistent fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "structured_data"):
            log_data.update(record.structured_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Source location for errors
        if record.levelno >= logging.ERROR:
            log_data["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_data, default=str)


class PlainLogFormatter(logging.Formatter):
    """Human-readable formatter that appends structured fields as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = getattr(record, "structured_data", None)
        if fields:
            line += " " + " ".join(f"{k}={v}" for k, v in fields.items())
        return line


class StructuredLogger:
    """
    Wrapper around Python logger that supports structured logging.

    Example:
        logger = get_logger(__name__)
        logger.info("banner_written", path="kgok.svg", bytes=812)
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, message: str, **kwargs):
        extra = {"structured_data": kwargs}
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs):
        extra = {"structured_data": kwargs}
        self._logger.error(message, exc_info=exc_info, extra=extra)


# Global configuration state
_configured = False


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
):
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Use JSON format (True) or plain text (False)
        log_file: Optional file path to write logs to
        stream: Console stream, stderr by default
        force: Reconfigure even if logging was already set up
    """
    global _configured
    if _configured and not force:
        return
    _configured = True

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    if json_output:
        console_handler.setFormatter(StructuredLogFormatter())
    else:
        console_handler.setFormatter(PlainLogFormatter())
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredLogFormatter())
        root_logger.addHandler(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
