"""Persisted record models.

Both records are stored as compact JSON objects in the secret store:

    {"username":"<str>","password":"<str>"}
    {"access_token":"<str>","expires_at":"<RFC3339, second precision>"}
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

# Zero value of TokenRecord.expires_at
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

# Full date-time with an explicit offset, as required by RFC3339
RFC3339_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})"
)


def _null_to_empty(value: Any) -> Any:
    return "" if value is None else value


class CredentialRecord(BaseModel):
    """Decoded username/password pair."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    username: str = ""
    password: str = ""

    @field_validator("username", "password", mode="before")
    @classmethod
    def null_is_empty(cls, value: Any) -> Any:
        return _null_to_empty(value)

    def __repr__(self) -> str:
        return f"CredentialRecord(username={self.username!r}, password='***')"


class TokenRecord(BaseModel):
    """Decoded OAuth access token and its expiry.

    Decoding accepts any RFC3339 timestamp, including fractional seconds.
    Encoding always emits UTC truncated to whole seconds, so a token stored
    as ``2020-01-02T03:04:05.000Z`` is written back as
    ``2020-01-02T03:04:05Z``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str = ""
    expires_at: datetime = Field(default=ZERO_TIME)

    @field_validator("access_token", mode="before")
    @classmethod
    def access_token_null_is_empty(cls, value: Any) -> Any:
        return _null_to_empty(value)

    @field_validator("expires_at", mode="before")
    @classmethod
    def expires_at_is_rfc3339(cls, value: Any) -> Any:
        if value is None:
            return ZERO_TIME
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not RFC3339_PATTERN.fullmatch(value):
            msg = f"expires_at must be an RFC3339 timestamp, got {value!r}"
            raise ValueError(msg)
        return value

    @field_serializer("expires_at")
    def serialize_expires_at(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            value = value.astimezone(timezone.utc)
        return value.replace(microsecond=0).isoformat().replace("+00:00", "Z")

    def is_empty(self) -> bool:
        """Return True for the zero token (nothing stored yet)."""
        return not self.access_token and self.expires_at == ZERO_TIME

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True if the token has expired at ``now`` (defaults to utcnow).

        The zero token is always expired.
        """
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return expires_at <= now

    def __repr__(self) -> str:
        return f"TokenRecord(access_token='***', expires_at={self.expires_at.isoformat()!r})"
