"""Session state machine: parsed inbound messages in, outbound lines out."""

from __future__ import annotations

import logging

from ..config.model import ConnectionConfig
from ..constants import (
    CMD_JOIN,
    CMD_NICK,
    CMD_NOTICE,
    CMD_PING,
    CMD_PONG,
    CMD_PRIVMSG,
    CMD_USER,
    REALNAME,
    RPL_WELCOME,
)
from ..logs.logger import BotLogger
from ..logs.logger import logger as default_logger
from .commands import CommandTable
from .models import ChannelCommand, ParsedMessage, SessionState
from .parser import build_channel_command, build_message

_HANDLED = frozenset({CMD_NOTICE, RPL_WELCOME, CMD_PING, CMD_PRIVMSG})


class IRCDispatcher:
    """Tracks registration state and decides what to send back.

    Each recognised case is checked independently for every message. The
    registration and join cases fire at most once per session; PING is
    answered every time. Unrecognised commands produce nothing.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        commands: CommandTable | None = None,
        log: BotLogger | None = None,
    ) -> None:
        self.config = config
        self.commands = commands if commands is not None else CommandTable.default()
        self.state = SessionState()
        self._log = log or default_logger

    def dispatch(self, message: ParsedMessage) -> list[str]:
        out: list[str] = []
        command = message.command
        if command == CMD_NOTICE and not self.state.sent_identity:
            out.extend(self._register())
        if command == RPL_WELCOME and not self.state.joined_channel:
            out.extend(self._join())
        if command == CMD_PING:
            out.append(build_message(None, CMD_PONG, message.params))
        if command == CMD_PRIVMSG:
            out.extend(self._handle_privmsg(message))
        if command not in _HANDLED:
            self._log.log_event(
                "irc",
                "unhandled_command",
                level=logging.DEBUG,
                user=self.config.nick,
                command=command,
            )
        return out

    def _register(self) -> list[str]:
        nick = self.config.nick
        lines = [
            build_message(None, CMD_NICK, nick),
            build_message(None, CMD_USER, f"{nick} 0 * :{REALNAME}"),
        ]
        self.state.sent_identity = True
        self._log.log_event("irc", "identity_sent", level=logging.DEBUG, user=nick)
        return lines

    def _join(self) -> list[str]:
        lines = [build_message(None, CMD_JOIN, self.config.channel)]
        self.state.joined_channel = True
        self._log.log_event(
            "irc",
            "channel_joined",
            level=logging.DEBUG,
            user=self.config.nick,
            channel=self.config.channel,
        )
        return lines

    def _handle_privmsg(self, message: ParsedMessage) -> list[str]:
        command = build_channel_command(message)
        if command is None:
            return []
        if command.destination == self.config.nick:
            return self.handle_private_message(command)
        if command.destination == self.config.channel:
            return self.handle_public_message(command)
        return []

    def handle_private_message(self, command: ChannelCommand) -> list[str]:
        """Messages addressed to the bot itself. No actions are defined yet."""
        self._log.log_event(
            "irc",
            "private_message",
            level=logging.DEBUG,
            user=self.config.nick,
            source=command.source,
            trigger=command.trigger,
        )
        return []

    def handle_public_message(self, command: ChannelCommand) -> list[str]:
        action = self.commands.lookup(command.trigger)
        if action is None:
            self._log.log_event(
                "irc",
                "unknown_trigger",
                level=logging.DEBUG,
                user=self.config.nick,
                channel=command.destination,
                trigger=command.trigger,
            )
            return []
        self._log.log_event(
            "irc",
            "command_matched",
            level=logging.DEBUG,
            user=self.config.nick,
            channel=command.destination,
            source=command.source,
            trigger=command.trigger,
        )
        return action(command)
