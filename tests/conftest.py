"""
Pytest configuration and shared fixtures for credcache tests.

This module provides secret store doubles and an in-memory keyring backend
so no test ever touches the real OS keychain.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import keyring
import pytest
from keyring.backend import KeyringBackend
from keyring.errors import PasswordDeleteError

from credcache.config import reset_config
from credcache.security import InMemorySecretStore

CREDENTIALS_SERVICE = "test.credentials"
TOKEN_SERVICE = "test.token"  # noqa: S105  # nosec B105


class MemoryKeyring(KeyringBackend):
    """Keyring backend keeping passwords in a dict."""

    priority = 1  # type: ignore[assignment]

    def __init__(self) -> None:
        super().__init__()
        self.passwords: dict[tuple[str, str], str] = {}

    def get_password(self, service: str, username: str) -> str | None:
        return self.passwords.get((service, username))

    def set_password(self, service: str, username: str, password: str) -> None:
        self.passwords[(service, username)] = password

    def delete_password(self, service: str, username: str) -> None:
        try:
            del self.passwords[(service, username)]
        except KeyError:
            raise PasswordDeleteError("Password not found") from None


@pytest.fixture
def memory_keyring() -> Generator[MemoryKeyring, None, None]:
    """Install an in-memory keyring backend for the duration of a test.

    Yields:
        The installed backend.
    """
    previous = keyring.get_keyring()
    backend = MemoryKeyring()
    keyring.set_keyring(backend)
    try:
        yield backend
    finally:
        keyring.set_keyring(previous)


@pytest.fixture
def credentials_store() -> InMemorySecretStore:
    """In-memory store scoped to the credentials namespace."""
    return InMemorySecretStore(CREDENTIALS_SERVICE)


@pytest.fixture
def token_store() -> InMemorySecretStore:
    """In-memory store scoped to the token namespace."""
    return InMemorySecretStore(TOKEN_SERVICE)


@pytest.fixture
def mock_store(mocker):
    """Create a secret store mock with per-test get/set/delete behaviour.

    Returns:
        Mock with the InMemorySecretStore interface.
    """
    store = mocker.Mock(spec=InMemorySecretStore)
    store.service = CREDENTIALS_SERVICE
    return store


@pytest.fixture
def test_logger() -> logging.Logger:
    """Logger that propagates to pytest's caplog handler."""
    logger = logging.getLogger("tests.credcache")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset process-wide settings and the package logger after each test."""
    yield
    reset_config()
    package_logger = logging.getLogger("credcache")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to every test not marked as integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
