"""Base signer implementation.

This module provides the BaseSigner class, which appends an HMAC-SHA256
signature to string values and verifies it again, and signs structured
objects through the object codec.

The signed format is ``value:signature`` where the signature is the unpadded
base64url HMAC-SHA256 of the UTF-8 value, keyed with the derived signing key.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from django_signing.crypto import HmacSha256, derive_key
from django_signing.encoding import Base64, ObjectCodec
from django_signing.exceptions import (
    EncodingError,
    InvalidSignatureError,
    MissingSeparatorError,
    SignatureFormatError,
)
from django_signing.interfaces.crypto import ISigner
from django_signing.interfaces.encoding import ISerializer

logger = logging.getLogger(__name__)

SEPARATOR = ":"


class BaseSigner(ISigner):
    """Signer for strings and objects using a key derived from (key, salt).

    Instances hold no mutable state after construction and may be shared
    between threads.

    Attributes:
        codec: Codec used by encode_object and decode_object.

    Example:
        >>> signer = BaseSigner(b"secret", b"salt")
        >>> signer.unsign(signer.sign("hello"))
        'hello'
    """

    def __init__(
        self,
        key: bytes | str,
        salt: bytes | str,
        serializer: Optional[ISerializer] = None,
    ) -> None:
        """Initialize a signer.

        Args:
            key: The shared secret.
            salt: Context string separating this signer's signatures from
                those made with the same secret for other purposes.
            serializer: Serializer for object payloads. Defaults to JSON.
        """
        self._signing_key = derive_key(key, salt)
        self.codec = ObjectCodec(serializer)

    def signature(self, value: str) -> str:
        """Compute the encoded signature of a value.

        Args:
            value: The value to sign.

        Returns:
            The unpadded base64url HMAC-SHA256 of the value.
        """
        return Base64.encode(HmacSha256.sum(self._signing_key, value.encode("utf-8")))

    def sign(self, value: str) -> str:
        """Sign a value.

        Args:
            value: The value to sign. It may itself contain separators.

        Returns:
            The signed token, ``value:signature``.
        """
        return f"{value}{SEPARATOR}{self.signature(value)}"

    def unsign(self, signed_value: str) -> str:
        """Verify a signed token and return the original value.

        The token is split on its last separator, so values containing ':'
        round-trip unchanged.

        Args:
            signed_value: The signed token.

        Returns:
            The original value.

        Raises:
            MissingSeparatorError: If the token has no separator.
            SignatureFormatError: If the signature is not valid base64url.
            InvalidSignatureError: If the signature does not match.
        """
        value, separator, encoded_signature = signed_value.rpartition(SEPARATOR)
        if not separator:
            logger.debug("rejected signed value: no separator")
            raise MissingSeparatorError(f"no {SEPARATOR!r} found in value")

        try:
            signature = Base64.decode(encoded_signature)
        except EncodingError as e:
            logger.debug("rejected signed value: malformed signature")
            raise SignatureFormatError("signature is not valid base64") from e

        if not HmacSha256.verify(self._signing_key, value.encode("utf-8"), signature):
            logger.debug("rejected signed value: signature mismatch")
            raise InvalidSignatureError("signature does not match")

        return value

    def encode_object(self, obj: Any, compress: bool = False) -> str:
        """Encode an object without signing it.

        Args:
            obj: The object to encode.
            compress: Whether to try compressing the payload.

        Returns:
            The encoded object.
        """
        return self.codec.encode(obj, compress)

    def decode_object(self, value: str) -> Any:
        """Decode an object produced by encode_object.

        Args:
            value: The encoded object.

        Returns:
            The decoded object.

        Raises:
            ObjectFormatError: If the value cannot be decoded.
        """
        return self.codec.decode(value)

    def sign_object(self, obj: Any, compress: bool = False) -> str:
        """Encode and sign an object.

        Args:
            obj: The object to sign.
            compress: Whether to try compressing the payload.

        Returns:
            The signed token.
        """
        return self.sign(self.encode_object(obj, compress))

    def unsign_object(self, signed_object: str) -> Any:
        """Verify a signed object token and decode the object.

        Args:
            signed_object: The signed token.

        Returns:
            The decoded object.
        """
        return self.decode_object(self.unsign(signed_object))
