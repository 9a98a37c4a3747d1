"""Encoding and timestamp interfaces for django-signing.

This module defines protocols for timestamp operations, payload serialization
and object encoding.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol


class ITimestamper(Protocol):
    """Interface for timestamp operations."""

    def format(self, when: datetime) -> str:
        """Format a datetime object as a string.

        Args:
            when: The datetime to format.

        Returns:
            The formatted timestamp string.
        """
        ...

    def parse(self, when: str | datetime) -> datetime:
        """Parse a timestamp string or datetime into a datetime object.

        Args:
            when: The timestamp string or datetime to parse.

        Returns:
            The parsed datetime object.
        """
        ...

    def now(self) -> datetime:
        """Get the current datetime.

        Returns:
            The current datetime.
        """
        ...


class ISerializer(Protocol):
    """Interface for converting objects to and from canonical bytes."""

    def dumps(self, obj: Any) -> bytes:
        """Serialize an object.

        Args:
            obj: The object to serialize.

        Returns:
            The serialized bytes.
        """
        ...

    def loads(self, data: bytes) -> Any:
        """Deserialize bytes produced by dumps.

        Args:
            data: The serialized bytes.

        Returns:
            The deserialized object.
        """
        ...


class IObjectEncoder(Protocol):
    """Interface for object encoding and decoding operations."""

    def encode(self, obj: Any, compress: bool = False) -> str:
        """Encode an object into URL-safe text.

        Args:
            obj: The object to encode.
            compress: Whether to try compressing the payload.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str) -> Any:
        """Decode text produced by encode back into an object.

        Args:
            text: The encoded text.

        Returns:
            The decoded object.
        """
        ...
