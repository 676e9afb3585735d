"""Structured logging configuration using structlog."""

import logging

import structlog
from rich.logging import RichHandler

from ..constants import CONSTANTS


def setup_logging(verbose: bool = False, level: str | None = None) -> None:
    """Configure structured logging with Rich formatting.

    Library code only emits through structlog; applications embedding the
    client call this once to get readable output.

    Args:
        verbose: Enable debug logging and the console renderer if True
        level: Explicit level name, overrides ``LOG_LEVEL`` when not verbose
    """
    log_level = logging.DEBUG if verbose else logging.getLevelName(level or CONSTANTS.LOG_LEVEL)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer() if verbose else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )
