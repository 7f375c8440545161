from __future__ import annotations

import logging

from ..logs.logger import logger
from .internal import ConfigError, InternalError, NetworkError, ParsingError


def classify_error(error: BaseException) -> str:
    """Return the error category used for logging.

    Args:
        error: The exception to classify.

    Returns:
        One of ``network``, ``parsing``, ``config``, ``internal`` or ``unknown``.
    """
    if isinstance(error, NetworkError | OSError | ConnectionError):
        return "network"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.

    Returns:
        None
    """
    fields: dict[str, object] = dict(context or {})
    if isinstance(error, InternalError):
        for key, value in error.data.items():
            fields.setdefault(key, value)
    for reserved in (
        "domain",
        "action",
        "message",
        "error_type",
        "level",
        "human",
        "exc_info",
    ):
        fields.pop(reserved, None)
    logger.log_event(
        "error",
        classify_error(error),
        level=logging.ERROR,
        message=f"{message}: {error}",
        error_type=type(error).__name__,
        **fields,
    )
