"""
OAuth token storage backed by a secret store.

TokenStorage does not cache: every get reads the store, so a token refreshed
by another process is always picked up. Unlike CredentialCache, failures are
raised to the caller so an API client can tell "no token yet" (the zero
TokenRecord) from "token store is broken" (an exception).
"""

from __future__ import annotations

from credcache.security.codec import decode_record, encode_record
from credcache.security.models import TokenRecord
from credcache.shared.constants import LogMessages
from credcache.shared.errors import SecretNotFoundError
from credcache.shared.protocols import SecretStoreProtocol


class TokenStorage:
    """Token storage for an API client, keyed by account.

    Calls are synchronous and take no timeout; a client that needs a deadline
    runs them in an executor and bounds the wait there.
    """

    def __init__(self, store: SecretStoreProtocol) -> None:
        """
        Args:
            store: Secret store scoped to the token namespace
        """
        self._store = store

    @property
    def store(self) -> SecretStoreProtocol:
        return self._store

    def get(self, key: str) -> TokenRecord:
        """
        Return the token stored under key.

        Returns:
            The decoded token, or the zero TokenRecord if nothing is stored

        Raises:
            RecordDecodeError: If the stored token is malformed
            Exception: Whatever the secret store raised other than
                SecretNotFoundError, unchanged
        """
        try:
            data = self._store.get(key)
        except SecretNotFoundError:
            return TokenRecord()

        return decode_record(
            data,
            TokenRecord,
            message=LogMessages.UNMARSHAL_TOKEN_FAILED,
            operation="get_token",
        )

    def set(self, key: str, token: TokenRecord) -> None:
        """
        Persist token under key.

        Raises:
            RecordEncodeError: If the token cannot be serialized
            Exception: Whatever the secret store raised, unchanged
        """
        data = encode_record(
            token,
            message=LogMessages.MARSHAL_TOKEN_FAILED,
            operation="set_token",
        )
        self._store.set(key, data)

    def delete(self, key: str) -> None:
        """
        Delete the token stored under key. Deleting a missing token succeeds.

        Raises:
            Exception: Whatever the secret store raised other than
                SecretNotFoundError, unchanged
        """
        try:
            self._store.delete(key)
        except SecretNotFoundError:
            return

    def __repr__(self) -> str:
        return f"TokenStorage(store={self._store!r})"
