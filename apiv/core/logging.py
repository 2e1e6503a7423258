"""
Core logging module.

This module configures package logging with Loguru.
"""

import logging
import sys

from loguru import logger

from apiv.core.config import settings


class InterceptHandler(logging.Handler):
    """
    Intercept standard logging and redirect to loguru.

    The pure path helpers log through the standard library; this handler
    forwards those records into loguru so every message ends up in the
    same sinks.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Try to get corresponding Loguru level or use level number
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str = None, serialize: bool = None):
    """
    Configure logging using Loguru.

    Removes loguru's default sink, adds a stderr sink and routes the
    ``apiv`` standard library loggers through :class:`InterceptHandler`.

    Args:
        level: Minimum level, defaults to ``settings.LOG_LEVEL``
        serialize: Emit JSON records, defaults to ``settings.LOG_JSON``

    Returns:
        The configured loguru logger
    """
    level = (level or settings.LOG_LEVEL).upper()
    serialize = settings.LOG_JSON if serialize is None else serialize

    logger.remove()

    if serialize:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=level,
            format=settings.LOG_FORMAT,
            backtrace=True,
            diagnose=False,
        )

    apiv_logger = logging.getLogger("apiv")
    apiv_logger.handlers = [InterceptHandler()]
    apiv_logger.setLevel(logging.DEBUG)
    apiv_logger.propagate = False

    return logger
