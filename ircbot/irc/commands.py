"""In-channel command table.

Maps a trigger word (exact, case-sensitive) to an action that returns the
outbound lines to send. Only the quit trigger ships by default.
"""

from __future__ import annotations

from collections.abc import Callable

from ..constants import CMD_QUIT, PREFIX_SENTINEL, QUIT_TRIGGER
from .models import ChannelCommand
from .parser import build_message

CommandAction = Callable[[ChannelCommand], list[str]]


def quit_action(command: ChannelCommand) -> list[str]:
    reason = f"{PREFIX_SENTINEL}{' '.join(command.args)}" if command.args else ""
    return [build_message(None, CMD_QUIT, reason)]


class CommandTable:
    def __init__(self, actions: dict[str, CommandAction] | None = None) -> None:
        self._actions: dict[str, CommandAction] = dict(actions or {})

    @classmethod
    def default(cls) -> CommandTable:
        return cls({QUIT_TRIGGER: quit_action})

    def register(self, trigger: str, action: CommandAction) -> None:
        if not trigger:
            raise ValueError("trigger must be non-empty")
        self._actions[trigger] = action

    def lookup(self, trigger: str) -> CommandAction | None:
        return self._actions.get(trigger)
