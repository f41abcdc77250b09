"""structlog configuration."""

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING", json_logs: bool = False) -> None:
    """Configure structlog with ISO timestamps, writing to stderr.

    Args:
        level: Minimum level name to emit.
        json_logs: Render JSON lines instead of the console format.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
