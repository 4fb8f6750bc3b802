"""Configuration loading and schema definitions."""

from hl_cli.config.loader import load_config, load_config_from_string
from hl_cli.config.schema import Config

__all__ = [
    "Config",
    "load_config",
    "load_config_from_string",
]
