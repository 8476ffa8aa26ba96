"""
Module: logger.py
Description: Structured logging configuration for simple-sqs.

Configures structlog for JSON output. Provides consistent logging across
all modules with structured key/value data.

Key Components:
- JSON output with timestamp and level
- Level filtering driven by settings.log_level
- get_logger() helper function

Dependencies: structlog, logging, datetime
Author: Simple SQS Team
"""

import logging
import structlog
from datetime import datetime, timezone

from simple_sqs.config.settings import settings


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(log_level: str) -> None:
    """
    Configure structlog for JSON output at the given level.

    Args:
        log_level: Name of the minimum level to emit (DEBUG, INFO, ...)
    """
    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        cache_logger_on_first_use=True,
    )


configure_logging(settings.log_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Message sent", queue_url="https://sqs...")
        {"event": "Message sent", "queue_url": "https://sqs...", "timestamp": "...", "level": "INFO"}
    """
    return structlog.get_logger(name)
