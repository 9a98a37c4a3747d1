"""Environment-driven signing configuration.

Hosts that keep their secret in the environment can build signers from a
SigningConfig instead of passing key and salt around explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import timedelta
from functools import lru_cache
from typing import Any, Optional

from django_signing.api import DEFAULT_MAX_AGE, DEFAULT_SALT, TimestampSigner, dumps, loads
from django_signing.exceptions import ConfigurationError
from django_signing.interfaces.encoding import ISerializer, ITimestamper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SigningConfig:
    """Signing settings.

    Attributes:
        key: The shared secret.
        salt: Context string for key derivation.
        compress: Whether dumps tries to compress payloads.
        max_age: Inclusive upper bound on token age accepted by loads.
    """

    key: bytes = field(repr=False)
    salt: str = DEFAULT_SALT
    compress: bool = False
    max_age: timedelta = DEFAULT_MAX_AGE

    @classmethod
    def from_env(cls) -> "SigningConfig":
        """Read the config from SIGNING_* environment variables.

        Returns:
            The config.

        Raises:
            ConfigurationError: If the key is missing or a value is invalid.
        """
        key = os.getenv("SIGNING_SECRET_KEY")
        if key is None or key == "":
            raise ConfigurationError("Missing required env vars: SIGNING_SECRET_KEY")

        salt = os.getenv("SIGNING_SALT") or DEFAULT_SALT
        compress = _parse_bool(os.getenv("SIGNING_COMPRESS"), False)

        raw_max_age = os.getenv("SIGNING_MAX_AGE_SECONDS")
        if raw_max_age is None or raw_max_age == "":
            max_age = DEFAULT_MAX_AGE
        else:
            seconds = _parse_non_negative_int("SIGNING_MAX_AGE_SECONDS", raw_max_age)
            max_age = timedelta(seconds=seconds)

        logger.debug(
            "loaded signing config (salt=%s, compress=%s, max_age=%s)", salt, compress, max_age
        )
        return cls(key=key.encode("utf-8"), salt=salt, compress=compress, max_age=max_age)

    def signer(
        self,
        serializer: Optional[ISerializer] = None,
        timestamper: Optional[ITimestamper] = None,
    ) -> TimestampSigner:
        """Build a timestamp signer from this config.

        Args:
            serializer: Serializer for object payloads. Defaults to JSON.
            timestamper: Clock and timestamp format. Defaults to the wall clock.

        Returns:
            A signer keyed with this config's key and salt.
        """
        return TimestampSigner(self.key, self.salt, serializer, timestamper)

    def dumps(self, obj: Any) -> str:
        """Sign an object with this config's key, salt and compression setting.

        Args:
            obj: The object to sign.

        Returns:
            The signed token.
        """
        return dumps(obj, self.key, self.salt, self.compress)

    def loads(self, signed_value: str) -> Any:
        """Verify a token with this config's key, salt and maximum age.

        Args:
            signed_value: The signed token.

        Returns:
            The decoded object.
        """
        return loads(signed_value, self.key, self.salt, self.max_age)


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def _parse_non_negative_int(name: str, value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer") from exc
    if parsed < 0:
        raise ConfigurationError(f"{name} must not be negative")
    return parsed


@lru_cache(maxsize=1)
def get_config() -> SigningConfig:
    return SigningConfig.from_env()
