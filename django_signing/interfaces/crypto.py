"""Signing interfaces for django-signing.

This module defines protocols for plain and timestamped signers.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Protocol


class ISigner(Protocol):
    """Interface for signing and verifying string values and objects."""

    def sign(self, value: str) -> str:
        """Sign a value.

        Args:
            value: The value to sign.

        Returns:
            The signed token, ``value:signature``.
        """
        ...

    def unsign(self, signed_value: str) -> str:
        """Verify a signed token and return the original value.

        Args:
            signed_value: The signed token.

        Returns:
            The original value.

        Raises:
            BadSignature: When verification fails.
        """
        ...

    def sign_object(self, obj: Any, compress: bool = False) -> str:
        """Encode an object and sign the encoded form.

        Args:
            obj: The object to sign.
            compress: Whether to try compressing the encoded payload.

        Returns:
            The signed token.
        """
        ...

    def unsign_object(self, signed_object: str) -> Any:
        """Verify a signed object token and decode the object.

        Args:
            signed_object: The signed token.

        Returns:
            The decoded object.

        Raises:
            BadSignature: When verification fails.
            ObjectFormatError: When the payload cannot be decoded.
        """
        ...


class ITimedSigner(ISigner, Protocol):
    """Interface for signers that embed a creation timestamp.

    Extends ISigner with age-enforcing verification.
    """

    def unsign_with_age(self, signed_value: str, max_age: timedelta | int | float) -> str:
        """Verify a signed token and enforce its maximum age.

        Args:
            signed_value: The signed token.
            max_age: Inclusive upper bound on the token's age.

        Returns:
            The original value.

        Raises:
            BadSignature: When verification fails.
            SignatureExpiredError: When the token is older than max_age.
        """
        ...

    def unsign_object_with_age(
        self, signed_object: str, max_age: timedelta | int | float
    ) -> Any:
        """Verify a signed object token, enforce its age and decode the object.

        Args:
            signed_object: The signed token.
            max_age: Inclusive upper bound on the token's age.

        Returns:
            The decoded object.
        """
        ...
