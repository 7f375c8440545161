"""Duplex byte-stream transports (plain TCP and TLS)."""

from __future__ import annotations

import asyncio
import logging
import ssl
from typing import Protocol, runtime_checkable

from ..config.model import ConnectionConfig
from ..constants import IRC_READ_CHUNK_SIZE
from ..errors.internal import NetworkError
from ..logs.logger import logger


@runtime_checkable
class Transport(Protocol):
    secure: bool

    async def open(self) -> None: ...

    async def read(self, n: int = IRC_READ_CHUNK_SIZE) -> bytes: ...

    async def write(self, data: bytes) -> None: ...

    async def close(self) -> None: ...


class StreamTransport:
    """asyncio streams transport; subclasses pick the TLS context."""

    secure = False

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None

    def _ssl_context(self) -> ssl.SSLContext | None:
        return None

    async def open(self) -> None:
        try:
            self.reader, self.writer = await asyncio.open_connection(
                self.host, self.port, ssl=self._ssl_context()
            )
        except OSError as e:
            raise NetworkError(
                f"could not connect to {self.host}:{self.port}: {e}",
                data={"host": self.host, "port": self.port},
            ) from e

    @property
    def is_open(self) -> bool:
        return self.writer is not None

    async def read(self, n: int = IRC_READ_CHUNK_SIZE) -> bytes:
        """Return the next chunk; ``b""`` means the peer closed the stream."""
        if not self.reader:
            raise NetworkError("transport is not open")
        return await self.reader.read(n)

    async def write(self, data: bytes) -> None:
        if not self.writer:
            raise NetworkError("transport is not open")
        self.writer.write(data)
        await self.writer.drain()

    async def close(self) -> None:
        if not self.writer:
            return
        try:
            self.writer.close()
            await self.writer.wait_closed()
        except OSError as e:
            # Peer already gone; nothing left to release.
            logger.log_event("irc", "close_error", level=logging.DEBUG, error=str(e))
        finally:
            self.writer = None
            self.reader = None


class PlainTransport(StreamTransport):
    secure = False


class SecureTransport(StreamTransport):
    secure = True

    def __init__(
        self, host: str, port: int, context: ssl.SSLContext | None = None
    ) -> None:
        super().__init__(host, port)
        self.context = context

    def _ssl_context(self) -> ssl.SSLContext:
        if self.context is None:
            self.context = ssl.create_default_context()
        return self.context


def create_transport(config: ConnectionConfig) -> StreamTransport:
    if config.secure:
        return SecureTransport(config.host, config.port)
    return PlainTransport(config.host, config.port)
