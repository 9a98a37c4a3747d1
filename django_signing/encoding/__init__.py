"""Encoding package.

This package provides the encoding primitives used by the signers:
unpadded base64url, base62, unix-second timestamps, the canonical value
model, JSON serialization and the compressing object codec.
"""

from .base62 import Base62
from .base64 import Base64
from .codec import ObjectCodec, compression_worthwhile
from .serializer import JSONSerializer
from .timestamper import UnixTimestamper
from .value import Array, Bool, Float, Int, Null, Object, String, Value, to_value

__all__ = [
    "Base62",
    "Base64",
    "JSONSerializer",
    "ObjectCodec",
    "UnixTimestamper",
    "compression_worthwhile",
    # value model
    "Value",
    "Null",
    "Bool",
    "Int",
    "Float",
    "String",
    "Array",
    "Object",
    "to_value",
]
