"""Loguru configuration for the CLI and the credibility assessor.

All output goes to stderr so ``factcheck check --json`` keeps stdout clean
for the verdict record. Records without a bound component are attributed
to ``factcheck``.
"""

import sys
from typing import Optional

from loguru import logger

from factcheck_system.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | <level>{message}</level>"
)


def configure_logging(log_format: Optional[str] = None, log_level: Optional[str] = None) -> None:
    """
    Configure loguru sinks.

    Behavior:
    - TTY + console format: colorized, human-readable lines
    - Anything else: one serialized JSON record per line
    """
    log_format = (log_format or settings.log_format).lower()
    log_level = (log_level or settings.log_level).upper()

    logger.remove()
    logger.configure(extra={"component": "factcheck"})

    if sys.stderr.isatty() and log_format == "console":
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=log_level, colorize=True)
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=log_level,
            serialize=True,
            diagnose=False,
        )


def get_logger(component: str):
    """
    Logger bound to a component name.

    Example:
        >>> log = get_logger("cli")
        >>> log.info("Running fact check")
    """
    return logger.bind(component=component)


configure_logging()

__all__ = ["logger", "get_logger", "configure_logging"]
