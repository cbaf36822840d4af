"""Protocol interfaces shared across credcache."""

from .storage import (
    KeychainTokenStorageProtocol,
    SecretStoreProtocol,
    TokenStorageProtocol,
)

__all__ = [
    "KeychainTokenStorageProtocol",
    "SecretStoreProtocol",
    "TokenStorageProtocol",
]
