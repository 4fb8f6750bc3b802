"""Configuration loader with support for drop-in directories."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from hl_cli.config.schema import Config
from hl_cli.errors import ParseError

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "hl" / "config.yaml"
DEFAULT_DROPIN_DIR = Path.home() / ".config" / "hl" / "conf.d"


def as_binding_list(value: Any) -> list[Any]:
    """Normalize the ``fields`` value to a list of binding strings.

    A single ``FIELD:COLOR`` string stands for a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ParseError(f"fields must be a list of FIELD:COLOR strings, not {type(value).__name__}")


def merge_config(
    base: dict[str, Any], override: dict[str, Any], prepend: bool = False
) -> dict[str, Any]:
    """Merge two configuration dictionaries, with override taking precedence.

    Bindings are concatenated instead of replaced: after the base's, or
    before them with ``prepend`` so that they win for the same field.
    """
    result = base.copy()

    for key, value in override.items():
        if key == "fields":
            existing = as_binding_list(result.get(key))
            added = as_binding_list(value)
            result[key] = added + existing if prepend else existing + added
        else:
            result[key] = value

    return result


def parse_yaml(text: str, source: str = "<string>") -> dict[str, Any]:
    """Parse a YAML document holding a configuration mapping.

    Raises:
        ParseError: If the document is not a mapping
    """
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(f"{source}: top level must be a mapping, not {type(data).__name__}")
    for key in data:
        if not isinstance(key, str):
            raise ParseError(f"{source}: option names must be strings, got {key!r}")
    return data


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a configuration file; a missing file is empty."""
    if not path.exists():
        log.debug("No configuration file at %s", path)
        return {}
    log.debug("Loading configuration from %s", path)
    return parse_yaml(path.read_text(), source=str(path))


def config_files(config_path: Path, dropin_dir: Path) -> Iterator[Path]:
    """Yield the main file, then the drop-in files in name order."""
    yield config_path
    if dropin_dir.is_dir():
        yield from sorted(dropin_dir.glob("*.yaml"))
        yield from sorted(dropin_dir.glob("*.yml"))


def load_config_data(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
) -> dict[str, Any]:
    """Load and merge the raw configuration data without validating it.

    Args:
        config_path: Path to main config file (default: ~/.config/hl/config.yaml)
        dropin_dir: Path to drop-in directory (default: ~/.config/hl/conf.d/)

    Returns:
        Merged configuration dictionary
    """
    config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    dropin_dir = Path(dropin_dir) if dropin_dir is not None else DEFAULT_DROPIN_DIR

    data: dict[str, Any] = {}
    for path in config_files(config_path, dropin_dir):
        data = merge_config(data, load_yaml_file(path))
    return data


def load_config(
    config_path: Path | str | None = None,
    dropin_dir: Path | str | None = None,
    overrides: dict[str, Any] | None = None,
) -> Config:
    """Load configuration from file and drop-in directory.

    Args:
        config_path: Path to main config file (default: ~/.config/hl/config.yaml)
        dropin_dir: Path to drop-in directory (default: ~/.config/hl/conf.d/)
        overrides: Values taking precedence over the files; their bindings
            go before the files' bindings

    Returns:
        Validated configuration object
    """
    data = load_config_data(config_path, dropin_dir)
    return Config(**merge_config(data, overrides or {}, prepend=True))


def load_config_from_string(yaml_string: str) -> Config:
    """Load configuration from a YAML string."""
    return Config(**parse_yaml(yaml_string))
