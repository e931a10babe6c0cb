"""structlog configuration shared by the CLI and library callers."""

from __future__ import annotations

import logging
import sys

import structlog

from .errors import ConfigError

LOG_FORMATS = ("console", "json")


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Configure structlog to write ``level`` and above to stderr.

    Parameters
    ----------
    level : str, optional
        Standard logging level name such as ``"DEBUG"`` or ``"WARNING"``.
    fmt : str, optional
        ``"console"`` for human-readable lines or ``"json"`` for one JSON
        object per event.

    Raises
    ------
    ConfigError
        If ``level`` or ``fmt`` is not recognised.
    """
    levels = logging.getLevelNamesMapping()
    name = level.upper()
    if name not in levels:
        msg = f"Unknown log level '{level}'."
        raise ConfigError(msg)
    if fmt not in LOG_FORMATS:
        msg = f"Unknown log format '{fmt}'; expected one of {', '.join(LOG_FORMATS)}."
        raise ConfigError(msg)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if fmt == "json":
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(levels[name]),
        context_class=dict,
        # stdout carries the "wrote <path>" lines
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


__all__ = ["LOG_FORMATS", "configure_logging"]
