"""credcache Error Handling Module

This module defines the error handling system for credcache, providing
structured error classes with context information.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Distinguished Not-Found: SecretNotFoundError is the only signal for an
  absent key, so read and delete paths can normalize it
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]

# Default keys to mask in safe_dict
SAFE_DICT_MASK_KEYS: tuple[str, ...] = ("secret_key",)


class ErrorCode(str, Enum):
    """Error codes for credcache.

    This enum serves as the single source of truth for all error codes
    used throughout the package.
    """

    # Secret Store Errors
    SECRET_NOT_FOUND = "SECRET_NOT_FOUND"  # noqa: S105  # nosec B105 - Error code constant
    SECRET_STORE_ERROR = "SECRET_STORE_ERROR"  # noqa: S105  # nosec B105 - Error code constant

    # Record Serialization Errors
    RECORD_DECODE_FAILED = "RECORD_DECODE_FAILED"
    RECORD_ENCODE_FAILED = "RECORD_ENCODE_FAILED"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"
    INVALID_CONFIG = "INVALID_CONFIG"
    MISSING_CONFIG = "MISSING_CONFIG"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path and Enum to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif isinstance(val, Enum):
            coerced[key] = val.value
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContextModel:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data so that contexts can be logged as JSON without leaking
    arbitrary objects (and with them, secret values).

    Attributes:
        operation: Optional operation name that caused the error
        service: Optional secret store service namespace
        secret_key: Optional lookup key (masked in logs by default)
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    service: str | None = None
    secret_key: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization validation and coercion."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self, *, mask_keys: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Export context as dict with sensitive fields masked.

        Args:
            mask_keys: Fields to exclude from output. Defaults to SAFE_DICT_MASK_KEYS.

        Returns:
            Dictionary with masked sensitive fields and guaranteed additional_data key.

        Example:
            >>> context = ErrorContextModel(secret_key="device-1", operation="get")
            >>> context.safe_dict()
            {'operation': 'get', 'additional_data': {}}
        """
        if mask_keys is None:
            mask_keys = SAFE_DICT_MASK_KEYS

        data: dict[str, Any] = {}
        if self.operation is not None and "operation" not in mask_keys:
            data["operation"] = self.operation
        if self.service is not None and "service" not in mask_keys:
            data["service"] = self.service
        if self.secret_key is not None and "secret_key" not in mask_keys:
            data["secret_key"] = self.secret_key

        if self.additional_data is not None and "additional_data" not in mask_keys:
            data["additional_data"] = self.additional_data
        else:
            data["additional_data"] = {}

        return data


ErrorContext = ErrorContextModel


class CredCacheError(Exception):
    """Base exception class for all credcache errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize CredCacheError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.original_error is not None:
            return f"{self.message}: {self.original_error}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error with code, message,
            masked context, and original_error (if present)
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(CredCacheError):
    """Domain-specific errors.

    Raised when persisted data violates the record formats.
    """


class InfrastructureError(CredCacheError):
    """Infrastructure-related errors.

    Raised when interacting with the backing secret store fails.
    """


class ApplicationError(CredCacheError):
    """Application-level errors, typically configuration."""


class SecretStoreError(InfrastructureError):
    """The secret store could not complete a read, write or delete."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        code: ErrorCode = ErrorCode.SECRET_STORE_ERROR,
    ) -> None:
        super().__init__(code, message, context, original_error)


class SecretNotFoundError(SecretStoreError):
    """The requested key does not exist in the secret store.

    Read paths treat this as an empty record and delete paths treat it as
    success; it never reaches callers of the caches.
    """

    def __init__(
        self,
        message: str = "secret not found",
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            message,
            context,
            original_error,
            code=ErrorCode.SECRET_NOT_FOUND,
        )


class RecordDecodeError(DomainError):
    """A persisted record is not valid JSON or does not match its shape."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(ErrorCode.RECORD_DECODE_FAILED, message, context, original_error)


class RecordEncodeError(DomainError):
    """A record could not be serialized for storage."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(ErrorCode.RECORD_ENCODE_FAILED, message, context, original_error)


# Convenience functions for common error scenarios
def create_secret_not_found_error(
    service: str,
    key: str,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> SecretNotFoundError:
    """Create a not-found error for a key in a service namespace."""
    context = ErrorContext(
        operation=operation,
        service=service,
        secret_key=key,
    )
    return SecretNotFoundError(
        f"secret not found in {service}",
        context,
        original_error,
    )


def create_secret_store_error(
    message: str,
    service: str,
    key: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> SecretStoreError:
    """Create a store failure error with context."""
    context = ErrorContext(
        operation=operation,
        service=service,
        secret_key=key,
    )
    return SecretStoreError(message, context, original_error)


def create_config_error(
    message: str,
    config_key: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> ApplicationError:
    """Create a configuration error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"config_key": config_key} if config_key else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return ApplicationError(
        ErrorCode.CONFIG_ERROR,
        message,
        context,
        original_error,
    )
