"""Settings loader and singleton manager.

This module handles:
- Configuration file loading from TOML
- Thread-safe singleton pattern for the Settings instance
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

import toml
from pydantic import ValidationError

from credcache.config.models.settings import Settings
from credcache.shared.errors import ApplicationError, ErrorCode, ErrorContext

logger = logging.getLogger(__name__)

# Environment variable naming an explicit TOML configuration file
CONFIG_PATH_ENV = "CREDCACHE_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/credcache.toml")


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from TOML (if present) and environment variables.

    Args:
        config_path: TOML file to load. Defaults to ``$CREDCACHE_CONFIG``,
            then ``config/credcache.toml`` if it exists.

    Returns:
        Validated Settings

    Raises:
        ApplicationError: If an explicit file is missing or settings are invalid
    """
    explicit = config_path is not None or CONFIG_PATH_ENV in os.environ
    path = Path(config_path or os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)

    try:
        if path.exists():
            logger.debug("Loading settings from %s", path)
            return Settings.from_toml_file(path)

        if explicit:
            raise ApplicationError(
                ErrorCode.MISSING_CONFIG,
                f"Configuration file not found: {path}",
                ErrorContext(
                    operation="load_settings",
                    additional_data={"config_path": str(path)},
                ),
            )

        return Settings()
    except (ValidationError, toml.TomlDecodeError) as e:
        raise ApplicationError(
            ErrorCode.INVALID_CONFIG,
            f"Invalid configuration: {e}",
            ErrorContext(
                operation="load_settings",
                additional_data={"config_path": str(path)},
            ),
            original_error=e,
        ) from e


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking pattern to ensure thread-safety
    while minimizing lock overhead.
    """

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the global settings instance, loading it if necessary."""
        if SettingsLoader._instance is None:
            with SettingsLoader._lock:
                if SettingsLoader._instance is None:
                    SettingsLoader._instance = load_settings()

        return SettingsLoader._instance

    def reload_config(self) -> Settings:
        """Reload the global settings instance from configuration files."""
        with SettingsLoader._lock:
            SettingsLoader._instance = load_settings()

        return SettingsLoader._instance

    def reset(self) -> None:
        """Forget the cached settings; the next get_config() reloads them."""
        with SettingsLoader._lock:
            SettingsLoader._instance = None


_loader = SettingsLoader()


def get_config() -> Settings:
    """Return the process-wide Settings."""
    return _loader.get_config()


def reload_config() -> Settings:
    """Reload and return the process-wide Settings."""
    return _loader.reload_config()


def reset_config() -> None:
    """Drop the process-wide Settings."""
    _loader.reset()
