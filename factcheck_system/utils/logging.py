"""Structured logging for pipeline stages, keyed by analysis identifier.

Every event emitted while an analysis runs carries its ``analysis_id``: the
pipeline enters ``analysis_context()`` once per run and structlog's
contextvars merge the id into events from the search executor, gateway
client and every other component running inside that task.
"""

import logging
import sys
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars
from structlog.processors import JSONRenderer

from factcheck_system.config.settings import settings


def configure_structured_logging(
    log_format: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """
    Configure structlog processors and renderer.

    Console rendering is used only when stderr is a TTY and the format is
    ``console``; anything else gets one JSON object per line.

    Args:
        log_format: ``json`` or ``console``. Defaults to settings.log_format.
        log_level: Minimum level name. Defaults to settings.log_level.
    """
    log_format = (log_format or settings.log_format).lower()
    log_level = (log_level or settings.log_level).upper()

    processors = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if sys.stderr.isatty() and log_format == "console":
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    else:
        processors.append(JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_structured_logger(component: str, **context: Any) -> structlog.BoundLogger:
    """
    Logger bound to a component name plus any extra context.

    Example:
        >>> log = get_structured_logger("FactCheckPipeline")
        >>> log.info("progress", progress=60)
    """
    return structlog.get_logger().bind(component=component, **context)


@contextmanager
def analysis_context(analysis_id: str) -> Iterator[None]:
    """Attach ``analysis_id`` to every event logged inside the block."""
    with bound_contextvars(analysis_id=analysis_id):
        yield


def new_analysis_id() -> str:
    """UUID4 string for a newly submitted analysis."""
    return str(uuid.uuid4())


configure_structured_logging()


__all__ = [
    "analysis_context",
    "configure_structured_logging",
    "get_structured_logger",
    "new_analysis_id",
]
