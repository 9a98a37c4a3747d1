"""Object compression and encoding implementation.

This module provides object encoding/decoding with optional zlib compression
and unpadded base64url encoding. Compressed payloads are marked with a leading
'.' so the decoder knows to inflate them.
"""

from __future__ import annotations

import zlib
from typing import Any, Optional

from django_signing.exceptions import EncodingError, ObjectFormatError
from django_signing.interfaces.encoding import IObjectEncoder, ISerializer

from .base64 import Base64
from .serializer import JSONSerializer

COMPRESSED_MARKER = "."


def compression_worthwhile(original: bytes, compressed: bytes) -> bool:
    """Decide whether a compressed payload should replace the original.

    Compression must save at least two bytes, which pays for the marker and
    keeps tiny payloads from growing. An empty payload never compresses.

    Args:
        original: The uncompressed payload.
        compressed: The zlib-compressed payload.

    Returns:
        True if the compressed form should be used.
    """
    if not original:
        return False

    return len(compressed) < len(original) - 1


class ObjectCodec(IObjectEncoder):
    """Codec that serializes, optionally compresses, and encodes objects.

    Encoding:
    1. Serialize the object to bytes with the configured serializer
    2. If requested, compress with zlib and keep the result only if it is
       worthwhile
    3. Encode with unpadded base64url
    4. Prefix '.' if the compressed form was kept

    Decoding reverses this process. Every failure surfaces as ObjectFormatError.
    """

    def __init__(self, serializer: Optional[ISerializer] = None) -> None:
        """Initialize the codec.

        Args:
            serializer: Serializer for object payloads. Defaults to JSONSerializer.
        """
        self.serializer = serializer or JSONSerializer()

    def encode(self, obj: Any, compress: bool = False) -> str:
        """Encode an object into URL-safe text.

        Args:
            obj: The object to encode.
            compress: Whether to try compressing the payload.

        Returns:
            The encoded text, '.'-prefixed when compressed.

        Raises:
            ConversionError: If the default serializer cannot represent obj.

        Example:
            >>> ObjectCodec().encode({"a": 1})
            'eyJhIjoxfQ'
        """
        data = self.serializer.dumps(obj)

        is_compressed = False
        if compress:
            compressed = zlib.compress(data)
            if compression_worthwhile(data, compressed):
                data = compressed
                is_compressed = True

        encoded = Base64.encode(data)
        if is_compressed:
            return COMPRESSED_MARKER + encoded
        return encoded

    def decode(self, text: str) -> Any:
        """Decode text produced by encode back into an object.

        Args:
            text: The encoded text.

        Returns:
            The decoded object.

        Raises:
            ObjectFormatError: If the text is not valid base64url, not valid
                zlib data when marked compressed, or not deserializable, including
                payloads nested too deeply to parse.
        """
        decompress = text.startswith(COMPRESSED_MARKER)
        if decompress:
            text = text[len(COMPRESSED_MARKER):]

        try:
            data = Base64.decode(text)
        except EncodingError as e:
            raise ObjectFormatError("payload is not valid base64") from e

        if decompress:
            try:
                data = zlib.decompress(data)
            except zlib.error as e:
                raise ObjectFormatError("payload is not valid zlib data") from e

        try:
            return self.serializer.loads(data)
        except (ValueError, TypeError, RecursionError) as e:
            # JSONDecodeError and UnicodeDecodeError are ValueErrors
            raise ObjectFormatError("payload could not be deserialized") from e
