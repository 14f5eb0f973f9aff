"""
Configuration loader — reads steamlocate.yml into Settings.

The config file is optional. When none is found every setting keeps
its default; when one is found it is read as YAML, validated against
the Settings schema, and then environment overrides are applied.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from steam_locate.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Default config filename (looked up in the working directory)
CONFIG_FILE = "steamlocate.yml"

# Environment variables
ENV_CONFIG = "STEAMLOCATE_CONFIG"
ENV_COMMAND_TIMEOUT = "STEAMLOCATE_COMMAND_TIMEOUT"


class ConfigError(Exception):
    """Raised when the configuration file is invalid or unreadable."""


def user_config_path() -> Path:
    """Per-user config location (~/.config/steamlocate/config.yml)."""
    return Path.home() / ".config" / "steamlocate" / "config.yml"


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Locate the config file to use.

    Precedence: $STEAMLOCATE_CONFIG, then steamlocate.yml in the start
    directory (default: cwd), then the per-user config file.

    Returns:
        Path to the config file, or None if there is none.
    """
    explicit = os.environ.get(ENV_CONFIG)
    if explicit:
        return Path(explicit).expanduser()

    local = (start_dir or Path.cwd()) / CONFIG_FILE
    if local.is_file():
        return local

    user = user_config_path()
    if user.is_file():
        return user

    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Explicit config file. If None, searches via find_config_file.

    Returns:
        Validated Settings (defaults when no file exists).

    Raises:
        ConfigError: If the file is unreadable, not YAML, or fails validation.
    """
    if path is None:
        path = find_config_file()

    data: dict = {}
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")

        logger.debug("Loading settings from %s", path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

        try:
            loaded = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(f"Expected a YAML mapping in {path}, got {type(loaded).__name__}")

        # Settings may sit under a "steamlocate" key or be flat
        data = loaded.get("steamlocate", loaded) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Expected 'steamlocate' to be a mapping in {path}")

    override = os.environ.get(ENV_COMMAND_TIMEOUT)
    if override:
        data = {**data, "command_timeout": override}

    try:
        settings = Settings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    logger.debug(
        "Settings: command_timeout=%ss, %d extra search path(s)",
        settings.command_timeout, len(settings.extra_search_paths),
    )
    return settings
