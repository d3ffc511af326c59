"""Structured logging for rpcmarshal.

Library loggers wrap stdlib loggers under the "rpcmarshal" namespace, which
carries a NullHandler, so nothing is written until the host configures
logging. Applications that want rendered output call configure_logging().
Calling it again replaces the handler it installed before.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

logging.getLogger("rpcmarshal").addHandler(logging.NullHandler())

_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO", fmt: str = "console") -> None:
    """Route structlog and stdlib logging through one formatter.

    Args:
        level: Minimum level name, e.g. "DEBUG" or "WARNING"
        fmt: "console" for human-readable lines, "json" for one JSON object
            per line

    Raises:
        ValueError: If fmt is not a supported format

    """
    if fmt not in ("console", "json"):
        msg = f"Unsupported log format: {fmt!r}. Supported: console, json"
        raise ValueError(msg)

    global _handler
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if fmt == "console":
        renderer: Any = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
    root_logger.addHandler(handler)
    _handler = handler
    root_logger.setLevel(log_level)


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger that writes through the stdlib logger name."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
