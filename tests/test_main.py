from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ircbot import main as main_mod
from ircbot.errors.internal import NetworkError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("IRC_CONF_FILE", "IRC_HOST", "IRC_PORT", "IRC_SECURE", "IRC_NICK", "IRC_CHANNEL"):
        monkeypatch.delenv(var, raising=False)


def test_parse_args_defaults_are_none():
    args = main_mod.parse_args([])
    assert args.host is None
    assert args.port is None
    assert args.secure is None
    assert args.nick is None
    assert args.channel is None
    assert args.config is None


def test_parse_args_flags():
    args = main_mod.parse_args(
        ["--host", "h", "--port", "6667", "--insecure", "--nick", "n", "--channel", "#c"]
    )
    assert (args.host, args.port, args.secure, args.nick, args.channel) == (
        "h",
        6667,
        False,
        "n",
        "#c",
    )
    assert main_mod.parse_args(["--secure"]).secure is True


def test_parse_args_secure_flags_exclusive():
    with pytest.raises(SystemExit):
        main_mod.parse_args(["--secure", "--insecure"])


def _bot_factory(result=None, side_effect=None):
    bot = MagicMock()
    bot.run = AsyncMock(return_value=result, side_effect=side_effect)
    return MagicMock(return_value=bot), bot


def test_main_runs_bot_with_cli_config():
    factory, bot = _bot_factory(result=False)
    with patch.object(main_mod, "IRCBot", factory):
        code = main_mod.main(["--host", "h", "--port", "6667", "--insecure", "--nick", "n"])
    assert code == 0
    config = factory.call_args.args[0]
    assert (config.host, config.port, config.secure, config.nick) == ("h", 6667, False, "n")
    bot.run.assert_awaited_once()


def test_main_transmission_error_exit_code():
    factory, _ = _bot_factory(result=True)
    with patch.object(main_mod, "IRCBot", factory):
        assert main_mod.main([]) == 1


def test_main_connect_failure(caplog):
    caplog.set_level(logging.INFO)
    factory, _ = _bot_factory(side_effect=NetworkError("could not connect"))
    with patch.object(main_mod, "IRCBot", factory):
        assert main_mod.main([]) == 1
    msgs = [r.getMessage() for r in caplog.records]
    assert any("Network error: Bot failed to start: could not connect" in m for m in msgs)
    assert msgs[-1].endswith("Shutdown complete")


def test_main_invalid_config(tmp_path):
    missing = tmp_path / "missing.json"
    assert main_mod.main(["--config", str(missing)]) == 1


def test_main_keyboard_interrupt(caplog):
    caplog.set_level(logging.INFO)

    def interrupted(coro):  # type: ignore[no-untyped-def]
        coro.close()
        raise KeyboardInterrupt

    with patch.object(main_mod.asyncio, "run", interrupted):
        assert main_mod.main([]) == 0
    assert any("Interrupted by user" in r.getMessage() for r in caplog.records)
