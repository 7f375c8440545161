"""Configuration package exports."""

from .loader import load_config, load_file  # noqa: F401
from .model import ConnectionConfig  # noqa: F401

__all__ = ["ConnectionConfig", "load_config", "load_file"]
