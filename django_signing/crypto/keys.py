"""Signing key derivation.

This module turns a shared secret and a salt into a purpose-bound MAC key.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes

# Domain separator mixed between salt and secret
KEY_PURPOSE = b"signer"


def force_bytes(value: bytes | str) -> bytes:
    """Return value as bytes, UTF-8 encoding strings.

    Args:
        value: The bytes or string to convert.

    Returns:
        The value as bytes.

    Raises:
        TypeError: If value is neither bytes nor str.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"expected bytes or str, got {type(value).__name__}")


def derive_key(key: bytes | str, salt: bytes | str) -> bytes:
    """Derive the MAC key for a (secret, salt) pair.

    The derived key is SHA256(salt || "signer" || key), so the same secret used
    with different salts never produces interchangeable signatures.

    Args:
        key: The shared secret.
        salt: A non-secret context string.

    Returns:
        The 32-byte signing key.

    Example:
        >>> len(derive_key(b"secret", b"salt"))
        32
    """
    digest = hashes.Hash(hashes.SHA256())
    digest.update(force_bytes(salt))
    digest.update(KEY_PURPOSE)
    digest.update(force_bytes(key))
    return digest.finalize()
