"""Structured logging configuration using structlog."""
import sys

import structlog

LEVELS = {"debug": 10, "info": 20, "warning": 30, "warn": 30, "error": 40, "critical": 50}


def setup_logging(level: str = "info", fmt: str = "console") -> None:
    """Configure structlog for dwmstatus.

    Logs go to stderr; stdout may carry the status line itself. Uses the
    console renderer by default, JSON when fmt is "json".
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LEVELS.get(level.lower(), 20)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name=None):
    """Get a lazy structlog logger, optionally bound to a component name.

    The proxy resolves the configuration on first use, so module-level
    loggers created at import time still honour setup_logging.
    """
    if name:
        return structlog.get_logger(component=name)
    return structlog.get_logger()
