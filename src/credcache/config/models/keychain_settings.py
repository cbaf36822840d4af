"""Secret store configuration models.

Service namespaces are configuration rather than constants so that tests
and multiple installations can use separate keychain entries.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from credcache.shared.constants import KeychainDefaults


class KeychainSettings(BaseModel):
    """Secret store backend and service namespaces."""

    backend: str = Field(
        default=KeychainDefaults.BACKEND_KEYRING,
        description="Secret store backend (keyring, memory)",
    )
    credentials_service: str = Field(
        default=KeychainDefaults.CREDENTIALS_SERVICE,
        description="Service namespace for device credentials",
    )
    token_service: str = Field(
        default=KeychainDefaults.TOKEN_SERVICE,
        description="Service namespace for OAuth tokens",
    )

    model_config = ConfigDict(
        validate_assignment=True,
    )

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Validate the backend name."""
        backend = v.strip().lower()
        if backend not in KeychainDefaults.SUPPORTED_BACKENDS:
            supported = ", ".join(KeychainDefaults.SUPPORTED_BACKENDS)
            msg = f"Unsupported backend '{v}'. Supported: {supported}"
            raise ValueError(msg)
        return backend

    @field_validator("credentials_service", "token_service")
    @classmethod
    def validate_service(cls, v: str) -> str:
        """Validate a service namespace."""
        service = v.strip()
        if not service:
            raise ValueError("Service namespace must not be empty")
        return service

    @model_validator(mode="after")
    def validate_distinct_services(self) -> KeychainSettings:
        """Credentials and tokens must not share a namespace."""
        if self.credentials_service == self.token_service:
            msg = (
                "credentials_service and token_service must differ, "
                f"both are '{self.token_service}'"
            )
            raise ValueError(msg)
        return self


__all__ = ["KeychainSettings"]
