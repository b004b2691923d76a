"""
Structured JSON logging configuration for the vitals dashboard.

This module provides:
- JSON-formatted log output for log shipping
- Load ID propagation via contextvars (one ID per page load)
- Consistent log structure across the CLI and the web app

Log Structure (JSON):
{
    "timestamp": "2024-01-15T10:30:00Z",
    "level": "ERROR",
    "logger": "vitals_dashboard.services.dashboard_service",
    "message": "Dashboard load failed",
    "load_id": "abc-123",
    "exception": "Traceback ...",
    "extra": { ... }
}

Usage:
    from vitals_dashboard.core.logging_config import setup_logging

    setup_logging()
    logger.info("Fetching patients", extra={"url": url})
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# =============================================================================
# LOAD ID CONTEXT
# =============================================================================
# Each pipeline run gets a unique ID that propagates through all log statements,
# including those emitted while the fetch coroutine is suspended.

load_id_var: ContextVar[Optional[str]] = ContextVar("load_id", default=None)


def get_load_id() -> Optional[str]:
    """Get the current load ID from context (coroutine-safe)."""
    return load_id_var.get()


def set_load_id(load_id: str) -> None:
    """Set the load ID in context for the current page load."""
    load_id_var.set(load_id)


def clear_load_id() -> None:
    """Clear the load ID (call at end of a page load)."""
    load_id_var.set(None)


# =============================================================================
# JSON FORMATTER
# =============================================================================

class JSONFormatter(logging.Formatter):
    """
    Single-line JSON log formatter.

    All timestamps are UTC.
    """

    # Standard LogRecord attributes that are never copied into "extra"
    STANDARD_ATTRS = frozenset({
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "taskName", "message",
    })

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as single-line JSON."""
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        load_id = get_load_id()
        if load_id:
            log_entry["load_id"] = load_id

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.STANDARD_ATTRS and not key.startswith("_")
        }
        if extra:
            log_entry["extra"] = extra

        return json.dumps(log_entry, default=str, ensure_ascii=False)


# =============================================================================
# LOGGING SETUP
# =============================================================================

def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    include_uvicorn: bool = False
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; if False, use human-readable format
        include_uvicorn: If True, also route uvicorn loggers through the root handler

    Environment Variables (used when the argument is None):
        LOG_LEVEL: Log level (default: INFO)
        LOG_FORMAT: "json" or "text" (default: json)
    """
    level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    if json_format is None:
        json_format = os.environ.get("LOG_FORMAT", "json").lower() == "json"

    # stderr keeps stdout free for the CLI's own output
    handler = logging.StreamHandler(sys.stderr)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    app_logger = logging.getLogger("vitals_dashboard")
    app_logger.setLevel(level)
    app_logger.handlers = []  # Inherit from root
    app_logger.propagate = True

    # httpx logs every request at INFO; keep it at WARNING unless debugging
    if level != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)

    if include_uvicorn:
        for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
            logger = logging.getLogger(logger_name)
            logger.handlers = []
            logger.propagate = True

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"level": level, "format": "json" if json_format else "text"}
    )
