"""structlog setup."""

import logging
from typing import Any, List, Optional

import structlog

from nutricalc.infrastructure.config import get_log_format, get_log_level


def configure_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
) -> None:
    """
    Configure structlog processors and level filtering.

    Args:
        level: Level name, defaults to NUTRICALC_LOG_LEVEL
        fmt: "console" or "json", defaults to NUTRICALC_LOG_FORMAT
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    renderer: Any
    if (fmt or get_log_format()) == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )
