"""django-signing API package.

This package provides the plain and timestamped signers and the stateless
dumps/loads entry points.
"""

from django_signing.api.facade import DEFAULT_MAX_AGE, DEFAULT_SALT, dumps, loads
from django_signing.api.signer import SEPARATOR, BaseSigner
from django_signing.api.timestamp import TimestampSigner

__all__ = [
    # Signers
    "BaseSigner",
    "TimestampSigner",
    # Facade
    "dumps",
    "loads",
    # Constants
    "DEFAULT_MAX_AGE",
    "DEFAULT_SALT",
    "SEPARATOR",
]
