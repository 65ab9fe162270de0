"""Logging configuration and utilities.

Services log through structlog with key/value events; infrastructure modules
keep the stdlib ``logging`` module, which ``setup_logging`` routes to stdout at
the same level.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.processors import JSONRenderer, TimeStamper, add_log_level

from fraud_monitor.core.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure structured logging."""
    log_level = logging.getLevelNamesMapping()[settings.app.log_level.upper()]

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.observability.log_record_format == "json":
        processors.append(JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        processors=processors,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger tagged with the module name."""
    return structlog.get_logger().bind(logger=name)


class LoggerMixin:
    """Mixin providing logger access."""

    @property
    def logger(self) -> structlog.typing.FilteringBoundLogger:
        """Get logger for this instance."""
        return get_logger(self.__class__.__module__)
