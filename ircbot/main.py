"""Command line entry point: build the config and run one bot session."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .config import load_config
from .errors import ConfigError, NetworkError, log_error
from .irc import IRCBot
from .logs.logger import logger


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Minimal IRC bot: register, join one channel, answer PINGs"
    )
    parser.add_argument("--config", help="JSON config file (default: $IRC_CONF_FILE)")
    parser.add_argument("--host", help="Server hostname")
    parser.add_argument("--port", type=int, help="Server port")
    tls = parser.add_mutually_exclusive_group()
    tls.add_argument(
        "--secure", dest="secure", action="store_true", default=None, help="Use TLS"
    )
    tls.add_argument(
        "--insecure",
        dest="secure",
        action="store_false",
        default=None,
        help="Use plain TCP",
    )
    parser.add_argument("--nick", help="Nickname to register")
    parser.add_argument("--channel", help="Channel to join, e.g. '#channel'")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    config = load_config(
        args.config,
        overrides={
            "host": args.host,
            "port": args.port,
            "secure": args.secure,
            "nick": args.nick,
            "channel": args.channel,
        },
    )
    bot = IRCBot(config)
    had_error = await bot.run()
    return 1 if had_error else 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logger.log_event("app", "start")
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
        return 0
    except (ConfigError, NetworkError) as e:
        log_error("Bot failed to start", e)
        return 1
    finally:
        logger.log_event("app", "shutdown")


def cli() -> None:  # pragma: no cover
    raise SystemExit(main())
