"""Configuration loading utilities.

Values are merged from lowest to highest precedence: built-in defaults, an
optional JSON file, ``IRC_*`` environment variables and explicit overrides
(usually CLI flags).
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..constants import (
    DEFAULT_CHANNEL,
    DEFAULT_HOST,
    DEFAULT_NICK,
    DEFAULT_PORT,
)
from ..errors.internal import ConfigError
from ..logs.logger import logger
from .model import ConnectionConfig

CONF_FILE_ENV = "IRC_CONF_FILE"

# config key -> environment variable
ENV_KEYS = {
    "host": "IRC_HOST",
    "port": "IRC_PORT",
    "secure": "IRC_SECURE",
    "nick": "IRC_NICK",
    "channel": "IRC_CHANNEL",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _defaults() -> dict[str, Any]:
    return {
        "host": DEFAULT_HOST,
        "port": DEFAULT_PORT,
        "secure": True,
        "nick": DEFAULT_NICK,
        "channel": DEFAULT_CHANNEL,
    }


def parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"invalid boolean for {name}: {value!r}", data={"key": name})


def load_file(path: str | os.PathLike[str]) -> dict[str, Any]:
    """Read a JSON configuration file.

    Args:
        path: Path to the configuration file.

    Returns:
        The configuration mapping (only known keys are kept).

    Raises:
        ConfigError: If the file is missing, unreadable or not a JSON object.
    """
    p = Path(path)
    try:
        with p.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.log_event("config", "file_missing", level=logging.WARNING, path=str(p))
        raise ConfigError(f"config file not found: {p}", data={"path": str(p)}) from e
    except (OSError, ValueError) as e:
        raise ConfigError(f"unreadable config file {p}: {e}", data={"path": str(p)}) from e
    if not isinstance(data, dict):
        raise ConfigError(f"config file {p} must hold a JSON object", data={"path": str(p)})
    logger.log_event("config", "file_loaded", level=logging.DEBUG, path=str(p))
    return {k: v for k, v in data.items() if k in ENV_KEYS}


def _from_env(env: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key, var in ENV_KEYS.items():
        raw = env.get(var)
        if raw is None or not raw.strip():
            continue
        if key == "secure":
            values[key] = parse_bool(var, raw)
        else:
            values[key] = raw.strip()
    return values


def load_config(
    path: str | os.PathLike[str] | None = None,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> ConnectionConfig:
    """Build a ConnectionConfig from defaults, file, environment and overrides.

    Args:
        path: Optional JSON config file. Falls back to ``IRC_CONF_FILE``.
        overrides: Highest-precedence values; ``None`` entries are ignored.
        env: Environment mapping, ``os.environ`` by default.

    Raises:
        ConfigError: If any source is invalid or the merged values fail validation.
    """
    env = os.environ if env is None else env
    merged = _defaults()
    file_path = path or env.get(CONF_FILE_ENV)
    if file_path:
        merged.update(load_file(file_path))
    merged.update(_from_env(env))
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    config = ConnectionConfig.from_dict(merged)
    logger.log_event(
        "app",
        "config_loaded",
        user=config.nick,
        channel=config.channel,
        host=config.host,
        port=config.port,
        transport="tls" if config.secure else "plain",
    )
    return config
