"""Pytest configuration and fixtures."""

import pytest

from hl_cli.config.loader import load_config_from_string
from hl_cli.config.schema import Config
from hl_cli.core.color import DEFAULT, GREEN, RED, YELLOW, render


@pytest.fixture
def sample_config() -> Config:
    """Sample configuration for testing."""
    yaml_content = """
fields:
  - "0:blue"
  - "1:size"
delimiter: " "
yellow_size: 20MB
red_size: 100MB
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def empty_config() -> Config:
    """Empty configuration for testing."""
    return Config()


@pytest.fixture
def cpuinfo_config() -> Config:
    """Configuration skipping to the value of /proc/cpuinfo lines."""
    yaml_content = """
fields: ["0:red"]
skip: ": "
"""
    return load_config_from_string(yaml_content)


@pytest.fixture
def reset() -> str:
    """Escape sequence written after every colored field."""
    return render(DEFAULT)


@pytest.fixture
def size_colors() -> dict[str, str]:
    """Escape sequences the size color resolves to."""
    return {"red": render(RED), "yellow": render(YELLOW), "green": render(GREEN)}
