"""
Keychain Constants

Default values for service namespaces and logging. These are defaults for
the configuration models only; the caches themselves take every namespace
explicitly at construction.
"""


class KeychainDefaults:
    """Default secret store settings."""

    BACKEND_KEYRING = "keyring"
    BACKEND_MEMORY = "memory"
    SUPPORTED_BACKENDS = (BACKEND_KEYRING, BACKEND_MEMORY)

    CREDENTIALS_SERVICE = "credcache.credentials"
    TOKEN_SERVICE = "credcache.token"  # noqa: S105  # nosec B105 - Service name


class LogMessages:
    """Log messages emitted by the caches."""

    GET_CREDENTIALS_FAILED = "could not get credentials"
    UNMARSHAL_CREDENTIALS_FAILED = "could not unmarshal credentials"
    MARSHAL_CREDENTIALS_FAILED = "could not marshal credentials"
    UNMARSHAL_TOKEN_FAILED = "could not unmarshal token"  # noqa: S105  # nosec B105
    MARSHAL_TOKEN_FAILED = "could not marshal token"  # noqa: S105  # nosec B105


class Logging:
    """Logging defaults."""

    DEFAULT_LEVEL = "INFO"
    DEFAULT_LOGGER_NAME = "credcache"
