"""IRC bot: owns the transport and drives framer -> parser -> dispatcher."""

from __future__ import annotations

import asyncio
import logging

from ..config.model import ConnectionConfig
from ..constants import IRC_ENCODING, IRC_READ_CHUNK_SIZE, LINE_TERMINATOR
from ..errors.handling import log_error
from ..errors.internal import NetworkError
from ..logs.logger import BotLogger
from ..logs.logger import logger as default_logger
from .commands import CommandTable
from .dispatcher import IRCDispatcher
from .framer import LineFramer
from .models import ConnectionState
from .parser import parse_message
from .transport import Transport, create_transport


class IRCBot:
    """One connection to one server, registering a nick and joining one channel.

    All outbound lines triggered by an inbound chunk are written (and
    drained) before the next chunk is read. The session ends when the peer
    closes the stream or a read fails; there is no reconnect.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        transport: Transport | None = None,
        commands: CommandTable | None = None,
        log: BotLogger | None = None,
    ) -> None:
        self.config = config
        self.transport = transport if transport is not None else create_transport(config)
        self._log = log or default_logger
        self.framer = LineFramer()
        self.dispatcher = IRCDispatcher(config, commands, self._log)
        self.state = ConnectionState.DISCONNECTED

    def _set_state(self, new_state: ConnectionState) -> None:
        if self.state != new_state:
            self._log.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                user=self.config.nick,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    def _sync_session_state(self) -> None:
        session = self.dispatcher.state
        if session.joined_channel:
            self._set_state(ConnectionState.JOINED)
        elif session.sent_identity:
            self._set_state(ConnectionState.IDENTIFIED)

    async def connect(self) -> None:
        """Open the transport.

        Raises:
            NetworkError: If the connection cannot be established.
        """
        await self.transport.open()
        self._set_state(ConnectionState.CONNECTED)
        self._log.log_event(
            "irc",
            "secure_connected" if self.transport.secure else "connected",
            user=self.config.nick,
            host=self.config.host,
            port=self.config.port,
        )

    async def process_data(self, data: bytes) -> list[str]:
        """Handle one inbound chunk and return the lines sent in response."""
        sent: list[str] = []
        for line in self.framer.frame(data):
            self._log.log_event("irc", "inbound", user=self.config.nick, line=line)
            if not line.strip():
                self._log.log_event(
                    "irc", "blank_line", level=logging.DEBUG, user=self.config.nick
                )
                continue
            for out in self.dispatcher.dispatch(parse_message(line)):
                await self.send_line(out)
                sent.append(out)
        self._sync_session_state()
        return sent

    async def send_line(self, payload: str) -> None:
        for fragment in payload.split(LINE_TERMINATOR):
            if fragment:
                self._log.log_event(
                    "irc", "outbound", user=self.config.nick, line=fragment
                )
        await self.transport.write(payload.encode(IRC_ENCODING))

    async def listen(self) -> bool:
        """Read until the stream ends.

        Returns:
            True if the session ended because of a transmission error,
            False on a graceful close.
        """
        try:
            while True:
                data = await self.transport.read(IRC_READ_CHUNK_SIZE)
                if not data:
                    return False
                await self.process_data(data)
        except (OSError, asyncio.IncompleteReadError, NetworkError) as e:
            log_error("Connection lost", e, {"user": self.config.nick})
            return True

    async def close(self, had_error: bool = False) -> None:
        await self.transport.close()
        self.framer.reset()
        self._set_state(ConnectionState.CLOSED)
        self._log.log_event(
            "irc",
            "closed_error" if had_error else "closed",
            level=logging.WARNING if had_error else logging.INFO,
            user=self.config.nick,
        )

    async def run(self) -> bool:
        """Connect and serve the session until the connection closes.

        Returns:
            True if the session ended with a transmission error.

        Raises:
            NetworkError: If the initial connection fails.
        """
        await self.connect()
        # Cancellation leaves this False, so the close is logged as graceful.
        had_error = False
        try:
            had_error = await self.listen()
        finally:
            await self.close(had_error)
        return had_error
