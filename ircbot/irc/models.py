"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ConnectionState(Enum):
    DISCONNECTED = auto()
    CONNECTED = auto()
    IDENTIFIED = auto()
    JOINED = auto()
    CLOSED = auto()


@dataclass(slots=True, frozen=True)
class ParsedMessage:
    """One inbound protocol line split into prefix, command and params.

    ``prefix`` keeps its leading ``:``; ``params`` is the verbatim rest of the
    line after the command token (empty string when there is none).
    """

    prefix: str | None
    command: str
    params: str

    @property
    def source(self) -> str:
        """Originator identity (``nick!user@host``) without the sentinel."""
        return self.prefix[1:] if self.prefix else ""


@dataclass(slots=True)
class SessionState:
    sent_identity: bool = False
    joined_channel: bool = False


@dataclass(slots=True, frozen=True)
class ChannelCommand:
    """A trigger word found in a PRIVMSG, with its context."""

    source: str
    destination: str
    trigger: str
    args: tuple[str, ...] = ()

    @property
    def nick(self) -> str:
        return self.source.split("!", 1)[0]
