"""Configuración de logging estructurado (structlog sobre logging estándar)."""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

_HANDLER_NAME = "fitness_tool.stderr"


def setup_logging(level: str = "WARNING") -> logging.Handler:
    """Configure structlog and attach a stderr handler to the root logger.

    Stdout is reserved for the training reports, so diagnostics always go to
    stderr. Calling it again only updates the level.

    Args:
        level: Level name (``DEBUG``, ``INFO``, ...).

    Returns:
        The installed handler.
    """
    shared_processors: list[Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    for existing in root_logger.handlers:
        if existing.get_name() == _HANDLER_NAME:
            return existing

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=shared_processors,
        )
    )
    root_logger.addHandler(handler)
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
