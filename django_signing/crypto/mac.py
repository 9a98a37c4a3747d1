"""HMAC-SHA256 implementation.

This module provides the MAC utility class used by the signers.
"""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac


class HmacSha256:
    """HMAC-SHA256 utility class."""

    @staticmethod
    def sum(key: bytes, message: bytes) -> bytes:
        """Compute the HMAC-SHA256 of the input data.

        Args:
            key: The MAC key.
            message: The bytes to authenticate.

        Returns:
            The 32-byte MAC.
        """
        mac = hmac.HMAC(key, hashes.SHA256())
        mac.update(message)
        return mac.finalize()

    @staticmethod
    def verify(key: bytes, message: bytes, signature: bytes) -> bool:
        """Check a MAC in constant time.

        Args:
            key: The MAC key.
            message: The authenticated bytes.
            signature: The MAC to check.

        Returns:
            True if the MAC matches, False otherwise.
        """
        mac = hmac.HMAC(key, hashes.SHA256())
        mac.update(message)
        try:
            mac.verify(signature)
        except InvalidSignature:
            return False
        return True
