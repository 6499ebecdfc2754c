"""
Logging utilities for consistent logging setup across the application.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable


CONSOLE_HANDLER_NAME = "jwtlic-console"


def setup_logger(logger: logging.Logger, log_level: int) -> logging.Handler:
    """
    Attach the jwtlic console handler to ``logger`` and set its level.

    Repeated calls reuse the named handler and only update its level.
    Messages go to stderr, leaving stdout for tokens and reports.

    Args:
        logger: The logger instance to configure
        log_level: The logging level to set

    Returns:
        The console handler
    """
    logger.setLevel(log_level)
    for handler in logger.handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            handler.setLevel(log_level)
            return handler

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(CONSOLE_HANDLER_NAME)
    handler.setLevel(log_level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(handler)
    return handler


def logging_observer(
    logger: logging.Logger | None = None,
) -> Callable[[Exception], None]:
    """
    Build an error observer that reports verification failures as warnings.

    Args:
        logger: Logger to write to (default: ``jwtlic`` logger)

    Returns:
        Callable suitable for ``TokenVerifier(on_error=...)``
    """
    target = logger or logging.getLogger("jwtlic")

    def observe(error: Exception) -> None:
        reason = getattr(error, "reason", None)
        if reason:
            target.warning("[jwtlic] token rejected (%s): %s", reason, error)
        else:
            target.warning("[jwtlic] token rejected: %s", error)

    return observe
