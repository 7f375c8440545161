"""IRC subsystem package.

Contains framing, parsing, command table, dispatcher, transport and the bot
that wires them together.
"""

from .bot import IRCBot  # noqa: F401
from .commands import CommandTable, quit_action  # noqa: F401
from .dispatcher import IRCDispatcher  # noqa: F401
from .framer import LineFramer  # noqa: F401
from .models import (  # noqa: F401
    ChannelCommand,
    ConnectionState,
    ParsedMessage,
    SessionState,
)
from .parser import build_channel_command, build_message, parse_message  # noqa: F401
from .transport import (  # noqa: F401
    PlainTransport,
    SecureTransport,
    Transport,
    create_transport,
)

__all__ = [
    "ChannelCommand",
    "CommandTable",
    "ConnectionState",
    "IRCBot",
    "IRCDispatcher",
    "LineFramer",
    "ParsedMessage",
    "PlainTransport",
    "SecureTransport",
    "SessionState",
    "Transport",
    "build_channel_command",
    "build_message",
    "create_transport",
    "parse_message",
    "quit_action",
]
