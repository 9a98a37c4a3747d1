"""django-signing interfaces package.

This package provides protocol definitions for signers, timestamps,
serializers and object encoders.
"""

from .crypto import ISigner, ITimedSigner
from .encoding import IObjectEncoder, ISerializer, ITimestamper

__all__ = [
    # crypto
    "ISigner",
    "ITimedSigner",
    # encoding
    "IObjectEncoder",
    "ISerializer",
    "ITimestamper",
]
