from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from ircbot.config.loader import load_config, load_file, parse_bool
from ircbot.config.model import ConnectionConfig
from ircbot.errors.internal import ConfigError


def test_model_fields(config):
    assert config.host == "host"
    assert config.port == 123
    assert config.secure is False
    assert config.nick == "nick"
    assert config.channel == "#channel"


def test_model_is_frozen(config):
    with pytest.raises(ValidationError):
        config.nick = "other"


@pytest.mark.parametrize(
    "override",
    [
        {"port": 0},
        {"port": 70000},
        {"host": "   "},
        {"nick": ""},
        {"nick": "two words"},
        {"channel": "#a b"},
    ],
)
def test_from_dict_rejects_invalid(override):
    data = {"host": "h", "port": 6667, "nick": "n", "channel": "#c", **override}
    with pytest.raises(ConfigError):
        ConnectionConfig.from_dict(data)


def test_from_dict_strips_host():
    cfg = ConnectionConfig.from_dict({"host": " h ", "port": "6667", "nick": "n", "channel": "#c"})
    assert cfg.host == "h"
    assert cfg.port == 6667
    assert cfg.model_dump() == {
        "host": "h",
        "port": 6667,
        "secure": False,
        "nick": "n",
        "channel": "#c",
    }


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("YES", True), ("off", False)])
def test_parse_bool(raw, expected):
    assert parse_bool("X", raw) is expected


def test_parse_bool_invalid():
    with pytest.raises(ConfigError):
        parse_bool("IRC_SECURE", "maybe")


def test_defaults_without_sources():
    cfg = load_config(env={})
    assert cfg.host == "irc.esper.net"
    assert cfg.port == 6697
    assert cfg.secure is True
    assert cfg.nick == "nodebottest"
    assert cfg.channel == "#channel"


def test_precedence_file_env_overrides(tmp_path):
    path = tmp_path / "bot.json"
    path.write_text(
        json.dumps({"host": "file.host", "port": 7000, "nick": "filenick", "unknown": 1}),
        encoding="utf-8",
    )
    env = {"IRC_CONF_FILE": str(path), "IRC_PORT": "7001", "IRC_SECURE": "false"}
    cfg = load_config(env=env, overrides={"nick": "clinick", "channel": None})
    assert cfg.host == "file.host"
    assert cfg.port == 7001
    assert cfg.secure is False
    assert cfg.nick == "clinick"
    assert cfg.channel == "#channel"


def test_explicit_path_beats_env_path(tmp_path):
    a = tmp_path / "a.json"
    b = tmp_path / "b.json"
    a.write_text(json.dumps({"nick": "from_a"}), encoding="utf-8")
    b.write_text(json.dumps({"nick": "from_b"}), encoding="utf-8")
    cfg = load_config(a, env={"IRC_CONF_FILE": str(b)})
    assert cfg.nick == "from_a"


def test_load_file_missing(tmp_path):
    with pytest.raises(ConfigError) as exc:
        load_file(tmp_path / "nope.json")
    assert exc.value.data["path"].endswith("nope.json")


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_load_file_invalid(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_file(path)


def test_invalid_env_port():
    with pytest.raises(ConfigError):
        load_config(env={"IRC_PORT": "not-a-port"})
