"""
Application configuration loaded from TOML files.

Each environment has its own file under ``carbon_aegis/config``; the
``ENVIRONMENT`` variable picks one when no file name is given explicitly.
"""
import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from carbon_aegis.utils.constants import ConfigFile

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

__all__ = ["Config", "ConfigFile", "get_config", "get_environment_config"]


class Config:
    """Parsed configuration file."""

    def __init__(self, file_name: str, data: dict[str, Any]):
        self.file_name = file_name
        self.data = data

    def section(self, name: str) -> dict[str, Any]:
        """Return a config section, or an empty dict when it is absent."""
        return self.data.get(name, {})

    def __repr__(self):
        return f"<Config: {self.file_name}>"


@lru_cache
def get_config(config_file: str) -> Config:
    """
    Load and cache a configuration file.

    Args:
        config_file: File name inside the config directory (e.g., "test.toml")

    Returns:
        Config instance wrapping the parsed TOML data

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = CONFIG_DIR / config_file
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "rb") as f:
        data = tomllib.load(f)

    logger.debug(f"Loaded configuration from {path}")
    return Config(config_file, data)


def get_environment_config() -> Config:
    """Load the config file matching the ENVIRONMENT variable (default: development)."""
    env = os.getenv("ENVIRONMENT", "development")
    return get_config(f"{env}.toml")
