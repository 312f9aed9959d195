"""structlog setup shared by the app, the server runner and scripts."""
import logging

import structlog

from .config import LOG_LEVEL


def parse_log_level(level: str) -> int:
    """Map a level name such as ``info`` to its numeric value.

    Raises:
        ValueError: The name is not a standard logging level
    """
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown LOG_LEVEL {level!r}")
    return value


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure structlog processors and the minimum log level."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(parse_log_level(level)),
        cache_logger_on_first_use=False,
    )
