#!/usr/bin/env python3
"""
Main entry point for nodebot
"""

from ircbot.main import cli

if __name__ == "__main__":
    cli()
