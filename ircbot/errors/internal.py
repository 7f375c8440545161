"""Centralized internal error hierarchy.

These exceptions provide semantic categories for the bot's failure paths.
Raw ``OSError`` / pydantic errors are wrapped at the boundary where they occur
so callers only need to handle this hierarchy.

Classes:
  InternalError        – Base for all internal errors.
  NetworkError         – Transport open / read / write failures.
  ParsingError         – Lines that cannot be parsed or built.
  ConfigError          – Invalid or unreadable connection configuration.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for transport layer errors.

    Covers failures to open the connection as well as read/write errors on
    an established one.
    """


class ParsingError(InternalError):
    """Exception raised when a protocol line cannot be parsed or built.

    The framing layer never hands empty lines to the parser, so this only
    surfaces when framing is bypassed or an outbound message has no command.
    """


class ConfigError(InternalError):
    """Exception raised for invalid connection configuration."""


__all__ = [
    "InternalError",
    "NetworkError",
    "ParsingError",
    "ConfigError",
]
