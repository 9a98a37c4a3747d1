"""Base64 encoding utilities.

This module provides unpadded URL-safe base64 encoding/decoding utilities.
"""

import base64
import binascii

from django_signing.exceptions import EncodingError


class Base64:
    """Base64 encoding utilities for unpadded URL-safe base64 operations.

    This class provides static methods to encode bytes to base64url strings
    and decode base64url strings back to bytes. The encoding uses URL-safe
    characters (replacing + with - and / with _) and strips '=' padding.
    """

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode bytes to an unpadded URL-safe base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            A URL-safe base64 encoded string without padding.
        """
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")

    @staticmethod
    def decode(base64_str: str) -> bytes:
        """Decode an unpadded URL-safe base64 string to bytes.

        Only the canonical encoding of some byte string is accepted: padding,
        characters from the standard alphabet and non-zero trailing bits are
        rejected, so no two distinct strings decode to the same bytes.

        Args:
            base64_str: The base64 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            EncodingError: If the string is not canonical unpadded base64url.
        """
        padded = base64_str + "=" * (-len(base64_str) % 4)
        try:
            data = base64.urlsafe_b64decode(padded)
        except (binascii.Error, ValueError) as e:
            raise EncodingError("invalid base64") from e

        # urlsafe_b64decode silently drops foreign characters
        if Base64.encode(data) != base64_str:
            raise EncodingError("non-canonical base64")

        return data
