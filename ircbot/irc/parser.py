"""IRC message parsing and building utilities."""

from __future__ import annotations

from ..constants import LINE_TERMINATOR, PREFIX_SENTINEL
from ..errors.internal import ParsingError
from .models import ChannelCommand, ParsedMessage


def parse_message(line: str) -> ParsedMessage:
    """Split one protocol line into prefix, command and params.

    Tokens are separated by single spaces. A first token starting with ``:``
    is the prefix and is kept whole; the next token is the command and the
    remaining tokens, re-joined with single spaces, are the params.

    Raises:
        ParsingError: If the line is empty or whitespace-only.
    """
    if not line.strip():
        raise ParsingError("cannot parse a blank line", data={"raw": line})
    pieces = line.split(" ")
    prefix: str | None = None
    if pieces[0].startswith(PREFIX_SENTINEL):
        prefix = pieces.pop(0)
    # A bare prefix with nothing after it leaves no command token.
    command = pieces.pop(0) if pieces else ""
    return ParsedMessage(
        prefix=prefix, command=command, params=" ".join(pieces)
    )


def build_message(
    prefix: str | None, command: str, params: str | None = None
) -> str:
    """Render an outbound line: ``"{prefix }{command}{ params}\\r\\n"``.

    Empty ``prefix`` or ``params`` are omitted along with their separator.

    Raises:
        ParsingError: If ``command`` is empty.
    """
    if not command:
        raise ParsingError("outbound message requires a command")
    head = f"{prefix} " if prefix else ""
    tail = f" {params}" if params else ""
    return f"{head}{command}{tail}{LINE_TERMINATOR}"


def build_channel_command(parsed: ParsedMessage) -> ChannelCommand | None:
    """Decompose a PRIVMSG into destination, trigger word and arguments.

    Returns None when the message carries no text after the destination.
    """
    args = parsed.params.split(" ")
    destination = args.pop(0)
    if not args:
        return None
    trigger = args.pop(0).removeprefix(PREFIX_SENTINEL)
    return ChannelCommand(
        source=parsed.source,
        destination=destination,
        trigger=trigger,
        args=tuple(args),
    )
