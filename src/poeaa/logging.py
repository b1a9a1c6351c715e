"""Structured logging with structlog.

Call configure_structlog once at CLI startup, then obtain loggers with
get_logger(component). Output goes to stderr so command output on stdout
stays clean.

Usage:
    from poeaa.logging import configure_structlog, get_logger

    configure_structlog(level="DEBUG", fmt="json")
    log = get_logger("cli")
    log.debug("tag_added", text="work")
"""

import logging
import sys

import structlog
from structlog.typing import Processor

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMATS = ("console", "json")


def _level_from_name(name: str) -> int:
    """Logging level integer for a level name; unknown names map to INFO."""
    level = getattr(logging, name.upper(), None)
    if not isinstance(level, int):
        return getattr(logging, DEFAULT_LOG_LEVEL)
    return level


def configure_structlog(level: str = DEFAULT_LOG_LEVEL, fmt: str = "console") -> None:
    """Configure structlog processors and filtering level.

    Args:
        level: Level name such as "DEBUG" or "warning".
        fmt: "json" for JSONRenderer, anything else for ConsoleRenderer.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if fmt == "json":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_level_from_name(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # stderr may be swapped between invocations (tests, embedding)
        cache_logger_on_first_use=False,
    )


def get_logger(component: str) -> structlog.typing.FilteringBoundLogger:
    """Logger with component already bound."""
    return structlog.get_logger().bind(component=component)
