"""Error hierarchy and helpers."""

from .handling import classify_error, log_error  # noqa: F401
from .internal import (  # noqa: F401
    ConfigError,
    InternalError,
    NetworkError,
    ParsingError,
)

__all__ = [
    "InternalError",
    "NetworkError",
    "ParsingError",
    "ConfigError",
    "classify_error",
    "log_error",
]
