"""Stream framing: raw bytes in, complete protocol lines out."""

from __future__ import annotations

from ..constants import IRC_ENCODING, LINE_TERMINATOR

_TERMINATOR = LINE_TERMINATOR.encode("ascii")


class LineFramer:
    """Accumulates inbound bytes and yields CR LF terminated lines.

    An unterminated tail is kept until a later chunk completes it, so a line
    split across two reads is delivered whole. Empty lines (consecutive
    terminators) are dropped.
    """

    def __init__(self, encoding: str = IRC_ENCODING) -> None:
        self.encoding = encoding
        self._buffer = bytearray()

    def frame(self, chunk: bytes) -> list[str]:
        self._buffer += chunk
        *complete, remainder = bytes(self._buffer).split(_TERMINATOR)
        self._buffer = bytearray(remainder)
        return [
            line.decode(self.encoding, errors="replace") for line in complete if line
        ]

    @property
    def pending(self) -> bytes:
        """Bytes received but not yet terminated."""
        return bytes(self._buffer)

    def reset(self) -> None:
        self._buffer.clear()
