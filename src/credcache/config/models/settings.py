"""credcache Settings Configuration Model.

Main Settings class that consolidates all configuration domains.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import toml
from pydantic import Field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from credcache.config.models.keychain_settings import KeychainSettings
from credcache.config.models.logging_settings import LoggingSettings

logger = logging.getLogger(__name__)

# Parsed TOML document for the Settings instance being built in this context
_toml_data: ContextVar[dict[str, Any] | None] = ContextVar("credcache_toml_data", default=None)


class TomlFileSettingsSource(PydanticBaseSettingsSource):
    """Settings source serving values from an already parsed TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any] | None) -> None:
        super().__init__(settings_cls)
        self._data = data or {}

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return {
            name: self._data[name]
            for name in self.settings_cls.model_fields
            if name in self._data
        }


class Settings(BaseSettings):
    """Settings facade providing unified configuration access.

    Values come from keyword arguments, then environment variables such as
    ``CREDCACHE_KEYCHAIN__TOKEN_SERVICE``, then the TOML file given to
    ``from_toml_file``, then field defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREDCACHE_",
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    keychain: KeychainSettings = Field(default_factory=KeychainSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Sources earlier in the tuple win; nested tables are merged key by key
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
            TomlFileSettingsSource(settings_cls, _toml_data.get()),
        )

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from TOML file; environment variables take precedence."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        token = _toml_data.set(toml.load(file_path))
        try:
            return cls()
        finally:
            _toml_data.reset(token)

    def to_toml_file(self, file_path: str | Path) -> None:
        """Save settings to TOML file.

        Only namespaces and logging options are written; no secret ever
        lives in the settings.
        """

        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(mode="json", exclude_none=True)
        with open(file_path, "w", encoding="utf-8") as f:
            toml.dump(data, f)

        logger.debug("Saved settings to %s", file_path)


__all__ = ["Settings"]
