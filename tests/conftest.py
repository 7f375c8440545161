from __future__ import annotations

import pytest

from ircbot.config.model import ConnectionConfig
from ircbot.irc.dispatcher import IRCDispatcher
from tests.fixtures.fake_transport import FakeTransport


@pytest.fixture
def config() -> ConnectionConfig:
    return ConnectionConfig(
        host="host", port=123, secure=False, nick="nick", channel="#channel"
    )


@pytest.fixture
def dispatcher(config: ConnectionConfig) -> IRCDispatcher:
    return IRCDispatcher(config)


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()
