"""Opaque value types for identifiers and timestamps carried by pushes.

Each type wraps a single JSON scalar. They compare by value, hash, and
serialize back to the same scalar, so a ``DeviceId`` never compares equal
to a ``UserId`` holding the same text.
"""

from datetime import UTC, datetime
from urllib.parse import quote

from pydantic import ConfigDict, RootModel, StrictStr, field_serializer, field_validator


class _StringValue(RootModel[StrictStr]):
    """Base for string-backed identifiers."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root


class DeviceId(_StringValue):
    """Identifier of a registered device."""


class UserId(_StringValue):
    """Identifier of a user account."""


class ChannelId(_StringValue):
    """Identifier of a channel."""


class ChannelTag(_StringValue):
    """Public tag used to address a channel's subscribers."""


class ClientId(_StringValue):
    """Identifier of an OAuth client."""


class EmailAddress(_StringValue):
    """An email address as reported by the service."""


class Url(_StringValue):
    """A URL. Not parsed or normalized."""


class MimeType(_StringValue):
    """A MIME type such as ``image/png``."""


class Name(_StringValue):
    """Display name of a user or channel."""


class Guid(_StringValue):
    """Client-supplied token that makes push creation idempotent."""


class PushId(_StringValue):
    """Unique identifier for a push."""

    def to_url_piece(self) -> str:
        """Percent-encode the identifier for use as one URL path segment."""
        return quote(self.root, safe="")


class PushbulletTime(RootModel[datetime]):
    """A timestamp, sent on the wire as fractional seconds since the epoch."""

    model_config = ConfigDict(frozen=True)

    @field_validator("root", mode="before")
    @classmethod
    def _from_epoch_seconds(cls, value: object) -> datetime:
        if isinstance(value, datetime):
            return value if value.tzinfo else value.replace(tzinfo=UTC)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("timestamp must be a number of seconds")
        try:
            return datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError):
            raise ValueError("timestamp out of range") from None

    @field_serializer("root")
    def _to_epoch_seconds(self, value: datetime) -> float:
        return value.timestamp()

    def __float__(self) -> float:
        return self.root.timestamp()
