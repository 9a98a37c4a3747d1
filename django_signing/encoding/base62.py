"""Base62 encoding utilities.

This module encodes non-negative integers with the 62 alphanumeric symbols,
most significant digit first.
"""

from django_signing.exceptions import EncodingError

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

_INDEX = {char: position for position, char in enumerate(ALPHABET)}


class Base62:
    """Base62 encoding utilities for compact integer representation."""

    @staticmethod
    def encode(number: int) -> str:
        """Encode a non-negative integer.

        Args:
            number: The integer to encode.

        Returns:
            The base62 string; zero encodes to "0".

        Raises:
            ValueError: If number is negative.

        Example:
            >>> Base62.encode(61)
            'z'
            >>> Base62.encode(62)
            '10'
        """
        if number < 0:
            raise ValueError("cannot base62-encode a negative number")
        if number == 0:
            return ALPHABET[0]

        digits = []
        while number:
            number, remainder = divmod(number, 62)
            digits.append(ALPHABET[remainder])
        return "".join(reversed(digits))

    @staticmethod
    def decode(encoded: str) -> int:
        """Decode a base62 string.

        Args:
            encoded: The base62 string.

        Returns:
            The decoded integer.

        Raises:
            EncodingError: If the string is empty or has non-base62 characters.
        """
        if not encoded:
            raise EncodingError("empty base62 input")

        number = 0
        for char in encoded:
            try:
                number = number * 62 + _INDEX[char]
            except KeyError:
                raise EncodingError(f"invalid base62 character {char!r}") from None
        return number
