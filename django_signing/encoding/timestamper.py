"""Unix-second timestamp formatting in base62.

This module provides the compact timestamp format embedded in timestamped
signatures: whole seconds since the unix epoch, base62 encoded.
"""

from datetime import datetime, timezone

from django_signing.exceptions import EncodingError
from django_signing.interfaces.encoding import ITimestamper

from .base62 import Base62

# Timestamps are unsigned 64-bit integers on the wire
MAX_TIMESTAMP = 2**64 - 1


class UnixTimestamper(ITimestamper):
    """Unix-second timestamp formatter using base62.

    Sub-second precision is truncated when formatting, so a formatted
    timestamp never lies in the future of the instant it was taken from.
    """

    def format(self, when: datetime) -> str:
        """Format a datetime as base62 unix seconds.

        Args:
            when: The datetime to format. Naive datetimes are taken as UTC.

        Returns:
            The base62 encoded timestamp.

        Raises:
            ValueError: If when is before the unix epoch.

        Example:
            >>> from datetime import datetime, timezone
            >>> UnixTimestamper().format(datetime(2022, 1, 1, tzinfo=timezone.utc))
            '1n3RoW'
        """
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)

        return Base62.encode(int(when.timestamp()))

    def parse(self, when: str | datetime) -> datetime:
        """Parse a base62 timestamp or datetime into an aware datetime.

        Args:
            when: The timestamp string or datetime to parse.

        Returns:
            The parsed datetime in UTC.

        Raises:
            EncodingError: If the string is not base62, exceeds the unsigned
                64-bit range or is outside the representable datetime range.
        """
        if isinstance(when, datetime):
            return when

        seconds = Base62.decode(when)
        if seconds > MAX_TIMESTAMP:
            raise EncodingError("timestamp exceeds 64 bits")

        try:
            return datetime.fromtimestamp(seconds, timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise EncodingError("timestamp out of range") from e

    def now(self) -> datetime:
        """Get the current datetime in UTC.

        Returns:
            The current datetime with UTC timezone.
        """
        return datetime.now(timezone.utc)
