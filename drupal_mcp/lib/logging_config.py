"""Structured logging configuration for both hosts."""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

# Set per inbound request by the HTTP host; empty for the stdio host
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if getattr(record, "correlation_id", None):
            log_data["correlation_id"] = record.correlation_id

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        # Extra fields are passed with an "extra_" prefix
        for key, value in record.__dict__.items():
            if key.startswith("extra_"):
                log_data[key.replace("extra_", "", 1)] = value

        return json.dumps(log_data, default=str)


class CorrelationFilter(logging.Filter):
    """Copy the current request's correlation ID onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = correlation_id_var.get()
        if correlation_id and not hasattr(record, "correlation_id"):
            record.correlation_id = correlation_id
        return True


def setup_logging(
    service_name: str,
    level: str = "INFO",
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Configure structured logging for a host process.

    Args:
        service_name: Name of the service (e.g., "http", "stdio")
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Output stream; defaults to stderr so stdout stays free for
            the stdio protocol channel

    Returns:
        The installed handler
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter(service_name))
    handler.addFilter(CorrelationFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Silence noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("mcp").setLevel(logging.WARNING)

    return handler


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in structured log
    """
    extra = {f"extra_{k}": v for k, v in extra_fields.items()}
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra)
