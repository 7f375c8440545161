from __future__ import annotations

import logging

import pytest

from ircbot.errors import (
    ConfigError,
    InternalError,
    NetworkError,
    ParsingError,
    classify_error,
    log_error,
)


def test_internal_error_copies_data():
    data = {"k": 1}
    err = InternalError("boom", data=data)
    data["k"] = 2
    assert err.data == {"k": 1}
    assert str(err) == "boom"
    assert InternalError("plain").data == {}


@pytest.mark.parametrize(
    ("error", "category"),
    [
        (NetworkError("x"), "network"),
        (ConnectionResetError("x"), "network"),
        (OSError("x"), "network"),
        (ParsingError("x"), "parsing"),
        (ConfigError("x"), "config"),
        (InternalError("x"), "internal"),
        (RuntimeError("x"), "unknown"),
    ],
)
def test_classify_error(error, category):
    assert classify_error(error) == category


def test_log_error_uses_category_template(caplog, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    caplog.set_level(logging.ERROR)
    log_error(
        "Bot failed to start",
        NetworkError("refused", data={"host": "h", "message": "shadowed"}),
        {"user": "nick"},
    )
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert "Network error: Bot failed to start: refused" in record.getMessage()
    assert "[nick" in record.getMessage()


def test_log_error_ignores_fields_named_like_log_arguments(caplog, monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    caplog.set_level(logging.ERROR)
    log_error(
        "x",
        NetworkError("boom", data={"action": "read", "domain": "irc"}),
        {"level": "high"},
    )
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert "Network error: x: boom" in record.getMessage()
