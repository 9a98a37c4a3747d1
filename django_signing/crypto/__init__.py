"""Crypto package.

This package provides key derivation and the HMAC-SHA256 primitive
used by the signers.
"""

from .keys import derive_key, force_bytes
from .mac import HmacSha256

__all__ = [
    "derive_key",
    "force_bytes",
    "HmacSha256",
]
