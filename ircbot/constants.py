"""
Configuration constants for the IRC bot

This module contains the constants used throughout the application.
Transport tunables (IRC_*) can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


# Transport
IRC_READ_CHUNK_SIZE = _get_env_int("IRC_READ_CHUNK_SIZE", 4096)
IRC_ENCODING = _get_env_str("IRC_ENCODING", "utf-8")

# Connection defaults (lowest precedence; the config loader layers file, env and CLI on top)
DEFAULT_HOST = "irc.esper.net"
DEFAULT_PORT = 6697
DEFAULT_NICK = "nodebottest"
DEFAULT_CHANNEL = "#channel"

# Registration / commands
REALNAME = "nodebot"
QUIT_TRIGGER = "!QUIT"

# Wire protocol
LINE_TERMINATOR = "\r\n"
PREFIX_SENTINEL = ":"

# Inbound commands
CMD_NOTICE = "NOTICE"
RPL_WELCOME = "001"
CMD_PING = "PING"
CMD_PRIVMSG = "PRIVMSG"

# Outbound commands
CMD_NICK = "NICK"
CMD_USER = "USER"
CMD_JOIN = "JOIN"
CMD_PONG = "PONG"
CMD_QUIT = "QUIT"
