"""
Secret store backends.

KeyringSecretStore stores secrets in the operating system keychain through
the ``keyring`` library (macOS Keychain, Windows Credential Locker, Secret
Service on Linux). InMemorySecretStore keeps them in process memory and is
used for tests and for the ``memory`` backend.

Both report an absent key with SecretNotFoundError and every other failure
with SecretStoreError.
"""

from __future__ import annotations

import logging
import threading

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from credcache.shared.constants import KeychainDefaults
from credcache.shared.errors import (
    create_config_error,
    create_secret_not_found_error,
    create_secret_store_error,
)
from credcache.shared.protocols import SecretStoreProtocol

logger = logging.getLogger(__name__)


class KeyringSecretStore:
    """Secret store backed by the OS keychain.

    Each value is stored as the keychain "password" of the entry
    ``(service, key)``.
    """

    def __init__(self, service: str) -> None:
        """
        Initialize the store.

        Args:
            service: Service namespace for all entries of this store

        Raises:
            ValueError: If service is empty
        """
        if not service or not isinstance(service, str):
            raise ValueError("Service must be a non-empty string")

        self._service = service

    @property
    def service(self) -> str:
        return self._service

    def set(self, key: str, value: str) -> None:
        """
        Store value under key.

        Raises:
            SecretStoreError: If the keychain rejects the write
        """
        try:
            keyring.set_password(self._service, key, value)
        except KeyringError as e:
            raise create_secret_store_error(
                f"could not write secret: {e}",
                service=self._service,
                key=key,
                operation="set",
                original_error=e,
            ) from e

    def get(self, key: str) -> str:
        """
        Return the value stored under key.

        Raises:
            SecretNotFoundError: If the keychain has no such entry
            SecretStoreError: If the keychain cannot be read
        """
        try:
            value = keyring.get_password(self._service, key)
        except KeyringError as e:
            raise create_secret_store_error(
                f"could not read secret: {e}",
                service=self._service,
                key=key,
                operation="get",
                original_error=e,
            ) from e

        if value is None:
            raise create_secret_not_found_error(self._service, key, operation="get")

        return value

    def delete(self, key: str) -> None:
        """
        Remove key from the keychain.

        Raises:
            SecretNotFoundError: If the keychain has no such entry
            SecretStoreError: If the keychain cannot be modified
        """
        try:
            keyring.delete_password(self._service, key)
        except PasswordDeleteError as e:
            # keyring signals a missing entry on delete with PasswordDeleteError
            raise create_secret_not_found_error(
                self._service,
                key,
                operation="delete",
                original_error=e,
            ) from e
        except KeyringError as e:
            raise create_secret_store_error(
                f"could not delete secret: {e}",
                service=self._service,
                key=key,
                operation="delete",
                original_error=e,
            ) from e

    def __repr__(self) -> str:
        return f"KeyringSecretStore(service={self._service!r})"


class InMemorySecretStore:
    """Thread-safe secret store held in process memory."""

    def __init__(self, service: str) -> None:
        if not service or not isinstance(service, str):
            raise ValueError("Service must be a non-empty string")

        self._service = service
        self._data: dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def service(self) -> str:
        return self._service

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def get(self, key: str) -> str:
        with self._lock:
            try:
                return self._data[key]
            except KeyError:
                raise create_secret_not_found_error(
                    self._service, key, operation="get"
                ) from None

    def delete(self, key: str) -> None:
        with self._lock:
            if self._data.pop(key, None) is None:
                raise create_secret_not_found_error(
                    self._service, key, operation="delete"
                )

    def keys(self) -> list[str]:
        """Return the stored keys in sorted order."""
        with self._lock:
            return sorted(self._data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"InMemorySecretStore(service={self._service!r})"


def create_secret_store(backend: str, service: str) -> SecretStoreProtocol:
    """
    Create a secret store for a service namespace.

    Args:
        backend: "keyring" or "memory"
        service: Service namespace

    Returns:
        A secret store instance

    Raises:
        ApplicationError: If backend is not supported
    """
    if backend == KeychainDefaults.BACKEND_KEYRING:
        store: SecretStoreProtocol = KeyringSecretStore(service)
    elif backend == KeychainDefaults.BACKEND_MEMORY:
        store = InMemorySecretStore(service)
    else:
        raise create_config_error(
            f"Unsupported secret store backend: {backend}",
            config_key="keychain.backend",
            operation="create_secret_store",
        )

    logger.debug("Created %r", store)
    return store


__all__ = [
    "InMemorySecretStore",
    "KeyringSecretStore",
    "create_secret_store",
]
