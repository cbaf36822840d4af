"""Configuration domain models."""

from __future__ import annotations

from .keychain_settings import KeychainSettings
from .logging_settings import LoggingSettings
from .settings import Settings

__all__ = [
    "KeychainSettings",
    "LoggingSettings",
    "Settings",
]
