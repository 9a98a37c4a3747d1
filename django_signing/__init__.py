"""django-signing Python implementation.

This package signs strings and structured objects with HMAC-SHA256 so that a
holder of the shared secret can detect tampering, optionally embeds a creation
timestamp to reject stale tokens, and encodes objects as compact URL-safe text.
Tokens are wire-compatible with Django's ``django.core.signing``.

Main Components:
    - BaseSigner: ``value:signature`` signing and verification
    - TimestampSigner: ``value:timestamp:signature`` with maximum age checks
    - dumps/loads: Stateless object signing entry points
    - Interfaces: Protocol definitions for signers, clocks and serializers

Example:
    >>> from django_signing import dumps, loads
    >>> token = dumps({"a": 1}, key=b"secret", salt=b"salt")
    >>> loads(token, key=b"secret", salt=b"salt", max_age=60)
    {'a': 1}
"""

from django_signing.api import (
    BaseSigner,
    TimestampSigner,
    dumps,
    loads,
)
from django_signing.config import SigningConfig, get_config
from django_signing.exceptions import (
    BadSignature,
    ConfigurationError,
    ConversionError,
    EncodingError,
    InvalidSignatureError,
    MissingSeparatorError,
    MissingTimestampError,
    ObjectFormatError,
    SignatureExpiredError,
    SignatureFormatError,
    SigningError,
    TimestampFormatError,
)

__version__ = "0.1.0"

__all__ = [
    # API
    "BaseSigner",
    "TimestampSigner",
    "dumps",
    "loads",
    # Configuration
    "SigningConfig",
    "get_config",
    # Exceptions
    "SigningError",
    "BadSignature",
    "MissingSeparatorError",
    "SignatureFormatError",
    "InvalidSignatureError",
    "MissingTimestampError",
    "TimestampFormatError",
    "SignatureExpiredError",
    "ObjectFormatError",
    "ConversionError",
    "EncodingError",
    "ConfigurationError",
]
