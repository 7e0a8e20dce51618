"""structlog configuration shared by the Streamlit app and the CLI."""

import logging
import os
import sys

import structlog


def setup_logging(level: str | None = None) -> None:
    """Configure structlog console logging.

    Args:
        level: Level name ("DEBUG", "INFO", ...). Defaults to the
            SHADOWSOUL_LOG_LEVEL environment variable, then INFO.
    """
    name = (level or os.environ.get("SHADOWSOUL_LOG_LEVEL") or "INFO").upper()
    min_level = getattr(logging, name, logging.INFO)
    if not isinstance(min_level, int):
        min_level = logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
