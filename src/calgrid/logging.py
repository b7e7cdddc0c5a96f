"""Logging configuration for calgrid."""

import logging
import time
from contextlib import contextmanager
from typing import Generator

import structlog

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger; ``name`` is bound as the ``logger`` field."""
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(name, logger=name)


def parse_level(level: str | int) -> int:
    """Resolve a level name (any case) or stdlib level number.

    Raises:
        ValueError: If the level is not one calgrid logs at.
    """
    if isinstance(level, int):
        if logging.getLevelName(level) not in _LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        return level
    name = level.strip().upper()
    if name not in _LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    return getattr(logging, name)


def configure_logging(
    level: str | int = "WARNING",
    json_output: bool = False,
    colors: bool = True,
) -> None:
    """Configure calgrid logging.

    Events carry a level, an ISO timestamp and any context bound through
    ``structlog.contextvars`` (a request id set by a UI host, for example).

    Args:
        level: Log level name ("debug", "INFO", ...) or stdlib level number
        json_output: True for JSON lines, False for the console renderer
        colors: Colour console output; ignored for JSON

    Raises:
        ValueError: If the level is unknown. Nothing is configured then.
    """
    log_level = parse_level(level)
    logging.basicConfig(format="%(message)s", level=log_level)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@contextmanager
def timed_block(
    logger: structlog.BoundLogger,
    event: str,
    level: str = "debug",
    **fields,
) -> Generator[dict, None, None]:
    """Context manager for timing code blocks.

    Yields a dict; keys the block adds to it are logged with the event. The
    event is only logged when the block completes; an exception propagates
    unlogged.
    """
    start = time.perf_counter()
    yield fields
    elapsed_ms = (time.perf_counter() - start) * 1000
    getattr(logger, level)(event, elapsed_ms=round(elapsed_ms, 2), **fields)
