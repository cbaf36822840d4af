"""
credcache - Secure credential and OAuth token caching

Caches a device's username/password and an API client's OAuth tokens on top
of an OS-level secret store, with lazy loading, write-through updates and a
clear distinction between "nothing stored" and "store failed".
"""

__version__ = "0.1.0"

from .security import (
    CredentialCache,
    CredentialRecord,
    InMemorySecretStore,
    KeyringSecretStore,
    TokenRecord,
    TokenStorage,
    create_secret_store,
)
from .shared.errors import (
    RecordDecodeError,
    RecordEncodeError,
    SecretNotFoundError,
    SecretStoreError,
)

__all__ = [
    "CredentialCache",
    "CredentialRecord",
    "InMemorySecretStore",
    "KeyringSecretStore",
    "RecordDecodeError",
    "RecordEncodeError",
    "SecretNotFoundError",
    "SecretStoreError",
    "TokenRecord",
    "TokenStorage",
    "create_secret_store",
]
