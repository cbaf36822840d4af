"""Dependency Injection container for credcache.

This module wires settings to secret stores and caches using
dependency-injector, so service namespaces come from configuration instead
of being compiled in.

The container manages:
- Settings (Singleton)
- Logger configured from settings (Singleton)
- Credentials and token secret stores (Singleton, one per namespace)
- Token storage (Singleton)
- Credential caches (Factory, one per device identity)
"""

from __future__ import annotations

import uuid

from dependency_injector import containers, providers

from credcache.config import Settings, load_settings
from credcache.security import CredentialCache, TokenStorage, create_secret_store
from credcache.shared.constants import Logging
from credcache.shared.logging import setup_structured_logger


class Container(containers.DeclarativeContainer):
    """Dependency Injection container for credcache services.

    Example:
        >>> container = Container()
        >>> cache = container.credential_cache("3f0e...")
        >>> tokens = container.token_storage()
    """

    config = providers.Singleton(load_settings)

    logger = providers.Singleton(
        setup_structured_logger,
        name=Logging.DEFAULT_LOGGER_NAME,
        level=config.provided.logging.level,
        log_file=config.provided.logging.file,
        use_rich_console=config.provided.logging.rich_console,
    )

    credentials_store = providers.Singleton(
        create_secret_store,
        backend=config.provided.keychain.backend,
        service=config.provided.keychain.credentials_service,
    )

    token_store = providers.Singleton(
        create_secret_store,
        backend=config.provided.keychain.backend,
        service=config.provided.keychain.token_service,
    )

    token_storage = providers.Singleton(
        TokenStorage,
        store=token_store,
    )

    # Called with the device identity: container.credential_cache(device_id)
    credential_cache = providers.Factory(
        CredentialCache,
        store=credentials_store,
        logger=logger,
    )


def create_container(settings: Settings | None = None) -> Container:
    """Create a container, optionally bound to explicit settings."""
    container = Container()
    if settings is not None:
        container.config.override(providers.Object(settings))
    return container


def create_credential_cache(
    device_id: uuid.UUID | str,
    settings: Settings | None = None,
) -> CredentialCache:
    """Create a credential cache for a device from settings."""
    return create_container(settings).credential_cache(device_id)


def create_token_storage(settings: Settings | None = None) -> TokenStorage:
    """Create the token storage an API client should persist tokens with."""
    return create_container(settings).token_storage()
