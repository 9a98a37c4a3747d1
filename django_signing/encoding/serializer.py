"""JSON serializer for signable objects."""

from __future__ import annotations

import json
from typing import Any

from django_signing.interfaces.encoding import ISerializer

from .value import to_value


class JSONSerializer(ISerializer):
    """Serializer producing compact UTF-8 JSON.

    Objects are first converted to canonical values, so unsupported types fail
    with ConversionError before any bytes are produced. Output uses no
    whitespace and keeps non-ASCII characters unescaped.
    """

    def dumps(self, obj: Any) -> bytes:
        """Serialize an object to compact JSON bytes.

        Args:
            obj: The object to serialize.

        Returns:
            UTF-8 encoded JSON.

        Raises:
            ConversionError: If obj contains unsupported values.

        Example:
            >>> JSONSerializer().dumps({"a": 1})
            b'{"a":1}'
        """
        plain = to_value(obj).to_python()
        return json.dumps(plain, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    def loads(self, data: bytes) -> Any:
        """Deserialize JSON bytes.

        Args:
            data: UTF-8 encoded JSON.

        Returns:
            The decoded object.

        Raises:
            UnicodeDecodeError: If data is not valid UTF-8.
            json.JSONDecodeError: If data is not valid JSON.
        """
        return json.loads(data.decode("utf-8"))
