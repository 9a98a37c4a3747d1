"""Convenience entry points for signing objects.

dumps and loads build a throwaway TimestampSigner per call, so they carry no
state between calls.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional

from django_signing.interfaces.encoding import ISerializer

from .timestamp import TimestampSigner

DEFAULT_SALT = "django.core.signing"
DEFAULT_MAX_AGE = timedelta(days=14)


def dumps(
    obj: Any,
    key: bytes | str,
    salt: bytes | str = DEFAULT_SALT,
    compress: bool = False,
    serializer: Optional[ISerializer] = None,
) -> str:
    """Return a URL-safe, timestamped and signed encoding of obj.

    Args:
        obj: The object to sign.
        key: The shared secret.
        salt: Context string for key derivation.
        compress: Whether to try compressing the payload.
        serializer: Serializer for the payload. Defaults to JSON.

    Returns:
        The signed token.

    Raises:
        ConversionError: If obj contains values the serializer cannot represent.
    """
    return TimestampSigner(key, salt, serializer).sign_object(obj, compress)


def loads(
    signed_value: str,
    key: bytes | str,
    salt: bytes | str = DEFAULT_SALT,
    max_age: timedelta | int | float = DEFAULT_MAX_AGE,
    serializer: Optional[ISerializer] = None,
) -> Any:
    """Reverse of dumps(): verify signature and age, then decode.

    Args:
        signed_value: The signed token.
        key: The shared secret.
        salt: Context string for key derivation.
        max_age: Inclusive upper bound on the token's age.
        serializer: Serializer for the payload. Defaults to JSON.

    Returns:
        The decoded object.

    Raises:
        BadSignature: If the token fails verification.
        SignatureExpiredError: If the token is older than max_age.
        ObjectFormatError: If the payload cannot be decoded.
    """
    return TimestampSigner(key, salt, serializer).unsign_object_with_age(
        signed_value, max_age
    )
