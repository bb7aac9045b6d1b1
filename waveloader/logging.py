"""Structured logging for waveloader.

Library loggers are structlog BoundLoggers wrapped around stdlib loggers
named ``waveloader.<component>``. Importing waveloader never touches the
root logger: events go through whatever handlers the host application has
installed, and are dropped below the stdlib logger's effective level.

The CLI calls ``configure_logging`` once to install a root handler that
renders events in one of two formats:
- console: human-readable (default)
- json: one JSON object per event, for log pipelines
"""

from __future__ import annotations

import logging
import os

import structlog

_configured = False

_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def configure_logging(
    log_format: str | None = None,
    level: str | None = None,
) -> None:
    """Install a structlog-rendering handler on the root logger.

    Meant for the command-line entry point, which owns its process.
    Idempotent — subsequent calls are ignored.

    Args:
        log_format: "json" or "console". Default via WAVELOADER_LOG_FORMAT env or "console".
        level: Log level (DEBUG, INFO, WARNING, ERROR). Default via WAVELOADER_LOG_LEVEL
            env or "WARNING".
    """
    global _configured
    if _configured:
        return

    resolved_format = log_format or os.environ.get("WAVELOADER_LOG_FORMAT", "console")
    resolved_level = level or os.environ.get("WAVELOADER_LOG_LEVEL", "WARNING")

    if resolved_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # Records from non-structlog loggers get the same level/timestamp fields.
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # stderr keeps stdout clean for CLI output.
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, resolved_level.upper(), logging.WARNING))

    _configured = True


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger with component context.

    Does not configure logging; safe to call at import time.

    Args:
        component: Component name (e.g., "container", "decoder", "cli").

    Returns:
        BoundLogger over the stdlib logger ``waveloader.<component>``,
        with the component field bound.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(f"waveloader.{component}"),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger.bind(component=component)
