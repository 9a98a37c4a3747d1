"""Timestamp signer implementation.

This module provides the TimestampSigner class, which embeds the signing time
between value and signature (``value:timestamp:signature``) and can refuse
tokens older than a maximum age.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Optional

from django_signing.encoding import UnixTimestamper
from django_signing.exceptions import (
    EncodingError,
    MissingTimestampError,
    SignatureExpiredError,
    TimestampFormatError,
)
from django_signing.interfaces.crypto import ITimedSigner
from django_signing.interfaces.encoding import ISerializer, ITimestamper

from .signer import SEPARATOR, BaseSigner

logger = logging.getLogger(__name__)


def as_timedelta(max_age: timedelta | int | float) -> timedelta:
    """Normalize a maximum age given as a timedelta or a number of seconds.

    Args:
        max_age: The maximum age.

    Returns:
        The maximum age as a timedelta.
    """
    if isinstance(max_age, timedelta):
        return max_age
    return timedelta(seconds=max_age)


class TimestampSigner(ITimedSigner):
    """Signer that embeds a creation timestamp and enforces maximum age.

    The timestamp is the base62 encoding of whole unix seconds, and is covered
    by the signature together with the value.

    Attributes:
        signer: The wrapped base signer.
        timestamper: Source of the current time and timestamp format.

    Example:
        >>> signer = TimestampSigner(b"secret", b"salt")
        >>> signer.unsign_with_age(signer.sign("hello"), max_age=60)
        'hello'
    """

    def __init__(
        self,
        key: bytes | str,
        salt: bytes | str,
        serializer: Optional[ISerializer] = None,
        timestamper: Optional[ITimestamper] = None,
    ) -> None:
        """Initialize a timestamp signer.

        Args:
            key: The shared secret.
            salt: Context string for key derivation.
            serializer: Serializer for object payloads. Defaults to JSON.
            timestamper: Clock and timestamp format. Defaults to the wall
                clock in base62 unix seconds.
        """
        self.signer = BaseSigner(key, salt, serializer)
        self.timestamper = timestamper or UnixTimestamper()

    def sign(self, value: str) -> str:
        """Timestamp and sign a value.

        Args:
            value: The value to sign.

        Returns:
            The signed token, ``value:timestamp:signature``.
        """
        timestamp = self.timestamper.format(self.timestamper.now())
        return self.signer.sign(f"{value}{SEPARATOR}{timestamp}")

    def _split(self, signed_value: str) -> tuple[str, str]:
        timestamped_value = self.signer.unsign(signed_value)

        value, separator, timestamp = timestamped_value.rpartition(SEPARATOR)
        if not separator:
            logger.debug("rejected signed value: no timestamp")
            raise MissingTimestampError("no timestamp found in value")

        return value, timestamp

    def _parse_timestamp(self, timestamp: str) -> datetime:
        try:
            return self.timestamper.parse(timestamp)
        except EncodingError as e:
            logger.debug("rejected signed value: malformed timestamp")
            raise TimestampFormatError("timestamp is malformed or out of range") from e

    def unsign(self, signed_value: str) -> str:
        """Verify a signed token and return the value, ignoring its age.

        Args:
            signed_value: The signed token.

        Returns:
            The original value.

        Raises:
            BadSignature: If the signature is missing, malformed or wrong.
            MissingTimestampError: If the signed value has no timestamp.
        """
        value, _ = self._split(signed_value)
        return value

    def timestamp(self, signed_value: str) -> datetime:
        """Verify a signed token and return the time it was signed.

        Args:
            signed_value: The signed token.

        Returns:
            The embedded creation time.

        Raises:
            BadSignature: If verification fails or the timestamp is malformed.
        """
        _, timestamp = self._split(signed_value)
        return self._parse_timestamp(timestamp)

    def unsign_with_age(self, signed_value: str, max_age: timedelta | int | float) -> str:
        """Verify a signed token and enforce its maximum age.

        A timestamp in the future (clock skew between signer and verifier)
        is accepted.

        Args:
            signed_value: The signed token.
            max_age: Inclusive upper bound on the token's age, as a timedelta
                or in seconds.

        Returns:
            The original value.

        Raises:
            BadSignature: If verification fails.
            TimestampFormatError: If the timestamp is malformed or out of range.
            SignatureExpiredError: If the token is older than max_age.
        """
        value, timestamp = self._split(signed_value)
        signed_at = self._parse_timestamp(timestamp)

        age = self.timestamper.now() - signed_at
        max_age = as_timedelta(max_age)
        if age > max_age:
            logger.debug("rejected signed value: expired")
            raise SignatureExpiredError(f"signature age {age} > {max_age}")

        return value

    def sign_object(self, obj: Any, compress: bool = False) -> str:
        """Encode, timestamp and sign an object.

        Args:
            obj: The object to sign.
            compress: Whether to try compressing the payload.

        Returns:
            The signed token.
        """
        return self.sign(self.signer.encode_object(obj, compress))

    def unsign_object(self, signed_object: str) -> Any:
        """Verify a signed object token, ignoring its age, and decode it.

        Args:
            signed_object: The signed token.

        Returns:
            The decoded object.
        """
        return self.signer.decode_object(self.unsign(signed_object))

    def unsign_object_with_age(
        self, signed_object: str, max_age: timedelta | int | float
    ) -> Any:
        """Verify a signed object token, enforce its age and decode it.

        Args:
            signed_object: The signed token.
            max_age: Inclusive upper bound on the token's age.

        Returns:
            The decoded object.
        """
        return self.signer.decode_object(self.unsign_with_age(signed_object, max_age))
