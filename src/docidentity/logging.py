"""Structured logging setup.

Console rendering in development, JSON lines elsewhere. The standard
library root logger is configured at the same level so the Azure SDK
loggers follow it.
"""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger, Processor

from docidentity.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and stdlib logging from settings."""
    if settings is None:
        settings = get_settings()

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development or settings.log_format == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=level,
    )
    # The Azure HTTP pipeline logs every request at INFO.
    logging.getLogger("azure.core.pipeline.policies.http_logging_policy").setLevel(
        max(level, logging.WARNING)
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name or "docidentity")
