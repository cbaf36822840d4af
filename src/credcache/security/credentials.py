"""
Credential cache for a device identity.

CredentialCache loads the ``{username, password}`` record of one device from
a secret store the first time it is read and serves later reads from memory.
Read accessors never raise: store and decode failures are logged and the
accessor returns an empty string, leaving the cache unloaded so the next read
retries. Mutations write through to the store before the in-memory record is
replaced.
"""

from __future__ import annotations

import logging
import threading
import uuid

from credcache.security.codec import decode_record, encode_record
from credcache.security.models import CredentialRecord
from credcache.shared.constants import LogMessages
from credcache.shared.errors import (
    RecordDecodeError,
    SecretNotFoundError,
    create_secret_store_error,
)
from credcache.shared.logging import log_operation_error
from credcache.shared.protocols import SecretStoreProtocol


class CredentialCache:
    """
    Lazily loaded, write-through cache of one device's credentials.

    Example:
        >>> from credcache.security import InMemorySecretStore
        >>> cache = CredentialCache("device-1", store=InMemorySecretStore("demo"))
        >>> cache.username
        ''
        >>> cache.update("user@example.org", "123456")
        >>> cache.username
        'user@example.org'
    """

    def __init__(
        self,
        device_id: uuid.UUID | str,
        *,
        store: SecretStoreProtocol,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the cache. Nothing is read until the first access.

        Args:
            device_id: Identity the credentials belong to; its string form is
                the secret store key
            store: Secret store scoped to the credentials namespace
            logger: Logger for load failures (defaults to the module logger)

        Raises:
            ValueError: If device_id is empty
        """
        identity = str(device_id)
        if not identity:
            raise ValueError("Device ID must be a non-empty string or UUID")

        self._identity = identity
        self._store = store
        self._logger = logger or logging.getLogger(__name__)

        # None means unloaded
        self._record: CredentialRecord | None = None
        self._lock = threading.RLock()

    @property
    def identity(self) -> str:
        """Secret store key of this cache."""
        return self._identity

    @property
    def is_loaded(self) -> bool:
        """Whether the record has been loaded (an absent key counts as loaded)."""
        return self._record is not None

    @property
    def username(self) -> str:
        """Cached username, or an empty string if none could be loaded."""
        return self._load().username

    @property
    def password(self) -> str:
        """Cached password, or an empty string if none could be loaded."""
        return self._load().password

    def update(self, username: str, password: str) -> None:
        """
        Persist new credentials and cache them.

        The store is written first; the cached record only changes if the
        write succeeds.

        Args:
            username: New username
            password: New password

        Raises:
            Exception: Whatever the secret store raised, unchanged
            RecordEncodeError: If the record cannot be serialized
        """
        record = CredentialRecord(username=username, password=password)
        data = encode_record(
            record,
            message=LogMessages.MARSHAL_CREDENTIALS_FAILED,
            operation="update_credentials",
        )

        with self._lock:
            self._store.set(self._identity, data)
            self._record = record

        self._logger.debug(
            "Updated credentials",
            extra={"operation": "update_credentials", "context": {"service": self._store.service}},
        )

    def delete(self) -> None:
        """
        Delete the stored credentials and forget the cached record.

        Deleting credentials that do not exist succeeds. After a successful
        delete the cache is unloaded, so the next read queries the store.

        Raises:
            Exception: Whatever the secret store raised other than
                SecretNotFoundError, unchanged
        """
        with self._lock:
            try:
                self._store.delete(self._identity)
            except SecretNotFoundError:
                pass

            self._record = None

        self._logger.debug(
            "Deleted credentials",
            extra={"operation": "delete_credentials", "context": {"service": self._store.service}},
        )

    def _load(self) -> CredentialRecord:
        """Return the cached record, loading it from the store if needed."""
        record = self._record
        if record is not None:
            return record

        with self._lock:
            if self._record is None:
                self._record = self._fetch()

            # Still None after a transient failure; stay unloaded and retry later
            return self._record if self._record is not None else CredentialRecord()

    def _fetch(self) -> CredentialRecord | None:
        """Read and decode the record; None means the load should be retried."""
        try:
            data = self._store.get(self._identity)
        except SecretNotFoundError:
            return CredentialRecord()
        except Exception as e:  # noqa: BLE001 - read accessors never raise
            log_operation_error(
                self._logger,
                create_secret_store_error(
                    LogMessages.GET_CREDENTIALS_FAILED,
                    service=self._store.service,
                    key=self._identity,
                    operation="load_credentials",
                    original_error=e,
                ),
            )
            return None

        try:
            return decode_record(
                data,
                CredentialRecord,
                message=LogMessages.UNMARSHAL_CREDENTIALS_FAILED,
                operation="load_credentials",
            )
        except RecordDecodeError as e:
            log_operation_error(self._logger, e)
            return None

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "unloaded"
        return f"CredentialCache(identity={self._identity!r}, {state})"
