"""credcache configuration.

Usage:
    from credcache.config import get_config

    settings = get_config()
    settings.keychain.credentials_service
"""

from __future__ import annotations

from .loader import SettingsLoader, get_config, load_settings, reload_config, reset_config
from .models import KeychainSettings, LoggingSettings, Settings

__all__ = [
    "KeychainSettings",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
    "get_config",
    "load_settings",
    "reload_config",
    "reset_config",
]
