"""Exception classes for django-signing.

This module defines custom exception types used throughout the django-signing library.
Integrity failures derive from BadSignature so callers can reject them outright, while
SignatureExpiredError stays separate for callers that re-issue stale tokens.
"""

from __future__ import annotations


class SigningError(Exception):
    """Base exception class for all django-signing errors."""

    pass


class BadSignature(SigningError):
    """Exception raised when a signed value fails integrity checks."""

    pass


class MissingSeparatorError(BadSignature):
    """Exception raised when a signed value contains no separator."""

    pass


class SignatureFormatError(BadSignature):
    """Exception raised when the signature segment is not valid base64url."""

    pass


class InvalidSignatureError(BadSignature):
    """Exception raised when the signature does not match the value."""

    pass


class MissingTimestampError(BadSignature):
    """Exception raised when a timestamped value carries no timestamp segment."""

    pass


class TimestampFormatError(BadSignature):
    """Exception raised when the timestamp segment is malformed or out of range."""

    pass


class SignatureExpiredError(SigningError):
    """Exception raised when a valid signature is older than the allowed age."""

    pass


class ObjectFormatError(SigningError):
    """Exception raised when an encoded object cannot be decoded or deserialized."""

    pass


class ConversionError(SigningError, TypeError):
    """Exception raised when a host value has no canonical representation.

    Attributes:
        type_name: Name of the offending Python type.
    """

    def __init__(self, type_name: str, message: str | None = None) -> None:
        super().__init__(message or f"cannot convert type {type_name} to a signable value")
        self.type_name = type_name


class EncodingError(SigningError):
    """Exception raised for low-level base64/base62 decoding errors."""

    pass


class ConfigurationError(SigningError, ValueError):
    """Exception raised when signing configuration is missing or invalid."""

    pass
