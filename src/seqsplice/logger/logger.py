"""Global logger configuration for the seqsplice package.

Importing the package only attaches a ``NullHandler`` so records reach the
host application's logging setup. Call :func:`setup_logger` to get console
output on stdout instead.
"""

import logging
import sys

from pydantic import ValidationError

from seqsplice.core.config import Settings

__all__ = ["logger", "setup_logger", "STDOUT_HANDLER_NAME"]

STDOUT_HANDLER_NAME = "seqsplice.stdout"


def _load_settings() -> Settings:
    try:
        return Settings.load()
    except ValidationError:
        # Unusable environment values must not break the caller
        return Settings()


def setup_logger(
    name: str = "seqsplice",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger writing to stdout.

    Unspecified arguments are read from the environment through
    :class:`~seqsplice.core.config.Settings`, falling back to the defaults
    when a variable holds an invalid value.

    Args:
        name: Logger name (typically package or module name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    settings = _load_settings()
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(name)

    # Only configure if our handler is not attached yet
    if not any(h.get_name() == STDOUT_HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(STDOUT_HANDLER_NAME)
        formatter = logging.Formatter(fmt=format_string, datefmt=settings.LOG_DATEFMT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.getLevelName(level.upper()))
        logger.propagate = False

    return logger


# Package logger, silent unless the application configures logging
logger = logging.getLogger("seqsplice")
logger.addHandler(logging.NullHandler())
