"""Logging configuration.

Everything in this project logs through structlog with upper-snake event
names and key/value context. ``configure_logging`` sets up rendering for the
CLI; library callers are free to configure structlog themselves instead.
"""

import logging
import sys

import structlog


def configure_logging(log_level: str = "INFO", *, dev_mode: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        log_level: Minimum level name to emit (DEBUG, INFO, WARNING, ERROR).
        dev_mode: Render human-readable console output instead of JSON lines.
    """
    level = logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if dev_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.extend(
            [
                structlog.processors.dict_tracebacks,
                structlog.processors.JSONRenderer(),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
