"""
Security module for credcache.

This module provides the credential cache, the OAuth token storage, their
persisted record models and the secret store backends they read from.
"""

from .credentials import CredentialCache
from .models import ZERO_TIME, CredentialRecord, TokenRecord
from .secret_store import InMemorySecretStore, KeyringSecretStore, create_secret_store
from .token_storage import TokenStorage

__all__ = [
    "ZERO_TIME",
    "CredentialCache",
    "CredentialRecord",
    "InMemorySecretStore",
    "KeyringSecretStore",
    "TokenRecord",
    "TokenStorage",
    "create_secret_store",
]
