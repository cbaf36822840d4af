"""Storage protocols for dependency inversion.

The caches depend on these protocols only, so any backend (OS keyring,
in-memory, a test double) can be injected at construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from credcache.security.models import TokenRecord


@runtime_checkable
class SecretStoreProtocol(Protocol):
    """Key-value secret store scoped to one service namespace.

    ``get`` and ``delete`` raise SecretNotFoundError when the key is absent.
    Any other failure is raised as SecretStoreError.

    Example:
        >>> from credcache.security import InMemorySecretStore
        >>> store: SecretStoreProtocol = InMemorySecretStore("example")
        >>> store.set("device", "{}")
        >>> store.get("device")
        '{}'
    """

    @property
    def service(self) -> str:
        """Service namespace the store is scoped to."""

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any existing value."""

    def get(self, key: str) -> str:
        """Return the value stored under key."""

    def delete(self, key: str) -> None:
        """Remove key from the store."""


@runtime_checkable
class TokenStorageProtocol(Protocol):
    """Token storage consumed by an upstream API client."""

    def get(self, key: str) -> TokenRecord:
        """Return the token stored under key, or the zero token when absent."""

    def set(self, key: str, token: TokenRecord) -> None:
        """Persist token under key."""


@runtime_checkable
class KeychainTokenStorageProtocol(TokenStorageProtocol, Protocol):
    """Token storage that also supports explicit invalidation."""

    def delete(self, key: str) -> None:
        """Remove the token stored under key. Absent keys are not an error."""
