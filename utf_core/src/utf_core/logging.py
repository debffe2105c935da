"""Structured logging for the utf-core command line tool.

Only the CLI logs. The codec modules stay silent so that library callers never
see output they did not ask for.
"""
from __future__ import annotations

import logging
import sys

import structlog

_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def configure_logging(level: str | None = None, *, fmt: str = "json") -> None:
    """Send CLI events to stderr, keeping stdout for command results.

    ``fmt="json"`` emits one object per line with ``ts``, ``level``, ``msg``
    and ``component``; ``fmt="console"`` renders the same fields for humans.
    """

    numeric_level = _LEVELS.get((level or "info").lower(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stderr)],
        format="%(message)s",
        force=True,
    )

    renderers: list[structlog.typing.Processor]
    if fmt == "console":
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]
    else:
        renderers = [structlog.processors.EventRenamer("msg"), structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.format_exc_info,
            *renderers,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        # each CLI invocation may pick a new level
        cache_logger_on_first_use=False,
    )


def _add_component(
    logger: structlog.typing.WrappedLogger, _name: str, event_dict: structlog.typing.EventDict
) -> structlog.typing.EventDict:
    event_dict.setdefault("component", getattr(logger, "name", None) or "utf_core.cli")
    return event_dict


__all__ = ["configure_logging"]
