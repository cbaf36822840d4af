"""
Tests for credcache error handling system.
"""

from enum import Enum
from pathlib import Path

import pytest

from credcache.shared.errors import (
    ApplicationError,
    CredCacheError,
    DomainError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
    RecordDecodeError,
    SecretNotFoundError,
    SecretStoreError,
    create_config_error,
    create_secret_not_found_error,
    create_secret_store_error,
)


class TestErrorContext:
    """Test cases for ErrorContext frozen dataclass."""

    def test_empty_context(self):
        context = ErrorContext()

        assert context.operation is None
        assert context.service is None
        assert context.secret_key is None
        assert context.additional_data is None

    def test_safe_dict_masks_secret_key(self):
        context = ErrorContext(operation="get", service="svc", secret_key="device-1")

        assert context.safe_dict() == {
            "operation": "get",
            "service": "svc",
            "additional_data": {},
        }

    def test_safe_dict_custom_mask(self):
        context = ErrorContext(operation="get", service="svc", secret_key="device-1")

        assert context.safe_dict(mask_keys=("service",)) == {
            "operation": "get",
            "secret_key": "device-1",
            "additional_data": {},
        }

    def test_additional_data_coercion(self):
        class Color(Enum):
            RED = "red"

        context = ErrorContext(additional_data={"path": Path("/tmp/x"), "color": Color.RED, "n": 1})

        assert context.additional_data == {"path": "/tmp/x", "color": "red", "n": 1}

    def test_additional_data_rejects_objects(self):
        with pytest.raises(TypeError, match="Cannot coerce"):
            ErrorContext(additional_data={"obj": object()})

    def test_additional_data_must_be_dict(self):
        with pytest.raises(TypeError, match="must be dict"):
            ErrorContext(additional_data=["x"])  # type: ignore[arg-type]

    def test_frozen(self):
        context = ErrorContext(operation="get")

        with pytest.raises(AttributeError):
            context.operation = "set"  # type: ignore[misc]


class TestErrorHierarchy:
    def test_not_found_is_store_error(self):
        error = SecretNotFoundError()

        assert isinstance(error, SecretStoreError)
        assert isinstance(error, InfrastructureError)
        assert error.code == ErrorCode.SECRET_NOT_FOUND

    def test_error_codes(self):
        assert {code.value for code in ErrorCode} == {
            "SECRET_NOT_FOUND",
            "SECRET_STORE_ERROR",
            "RECORD_DECODE_FAILED",
            "RECORD_ENCODE_FAILED",
            "CONFIG_ERROR",
            "INVALID_CONFIG",
            "MISSING_CONFIG",
        }

    def test_store_error_code(self):
        assert SecretStoreError("boom").code == ErrorCode.SECRET_STORE_ERROR

    def test_decode_error_is_domain_error(self):
        error = RecordDecodeError("could not unmarshal token")

        assert isinstance(error, DomainError)
        assert isinstance(error, CredCacheError)
        assert error.code == ErrorCode.RECORD_DECODE_FAILED

    def test_str_includes_cause(self):
        cause = ValueError("unexpected end of JSON input")
        error = RecordDecodeError("could not unmarshal token", original_error=cause)

        assert str(error) == "could not unmarshal token: unexpected end of JSON input"

    def test_str_without_cause(self):
        assert str(SecretStoreError("get error")) == "get error"

    def test_to_dict(self):
        error = SecretStoreError(
            "could not read secret",
            ErrorContext(operation="get", service="svc", secret_key="device-1"),
            original_error=RuntimeError("locked"),
        )

        assert error.to_dict() == {
            "code": "SECRET_STORE_ERROR",
            "message": "could not read secret",
            "context": {"operation": "get", "service": "svc", "additional_data": {}},
            "original_error": "locked",
        }


class TestErrorFactories:
    def test_create_secret_not_found_error(self):
        error = create_secret_not_found_error("svc", "device-1", operation="get")

        assert isinstance(error, SecretNotFoundError)
        assert error.context.service == "svc"
        assert error.context.secret_key == "device-1"
        assert error.context.operation == "get"

    def test_create_secret_store_error(self):
        cause = OSError("dbus unavailable")
        error = create_secret_store_error(
            "could not read secret", service="svc", key="k", operation="get", original_error=cause
        )

        assert type(error) is SecretStoreError
        assert error.original_error is cause

    def test_create_config_error(self):
        error = create_config_error("bad backend", config_key="keychain.backend")

        assert isinstance(error, ApplicationError)
        assert error.code == ErrorCode.CONFIG_ERROR
        assert error.context.additional_data == {"config_key": "keychain.backend"}
