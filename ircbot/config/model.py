from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors.internal import ConfigError


class ConnectionConfig(BaseModel):
    """Connection parameters for one bot instance.

    Immutable once built; shared read-only by the transport and dispatcher.

    Attributes:
        host: Server hostname.
        port: Server TCP port.
        secure: Whether to wrap the stream in TLS.
        nick: Nickname used for NICK/USER registration.
        channel: The single channel to join, compared verbatim against
            PRIVMSG destinations.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)
    secure: bool = False
    nick: str = Field(min_length=1)
    channel: str = Field(min_length=1)

    @field_validator("host", mode="before")
    @classmethod
    def strip_host(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("nick", "channel")
    @classmethod
    def no_whitespace(cls, v: str) -> str:
        # A space would split the token on the wire.
        if any(ch.isspace() for ch in v):
            raise ValueError("must not contain whitespace")
        return v

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConnectionConfig:
        """Create a ConnectionConfig from a mapping.

        Raises:
            ConfigError: If the data fails validation.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigError(
                f"invalid connection config: {e.error_count()} error(s)",
                data={"errors": [err["loc"] for err in e.errors()]},
            ) from e
