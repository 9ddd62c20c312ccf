"""Push models: the two lifecycle phases of a push and their parts.

A push is either new (built locally, about to be submitted) or existing
(confirmed by the server). ``NewPush`` and ``ExistingPush`` are sibling
models that share the fields in ``PushBase``; server-only fields live on
``ExistingPush`` alone, so a new push cannot carry them at all.
"""

from enum import Enum
from typing import Annotated, ClassVar, Iterator, Literal, Protocol, overload, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, RootModel

from pushbullet_types.identifiers import (
    ChannelId,
    ChannelTag,
    ClientId,
    DeviceId,
    EmailAddress,
    Guid,
    MimeType,
    Name,
    PushbulletTime,
    PushId,
    Url,
    UserId,
)
from pushbullet_types.phase import PushPhase


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PushDirection(str, Enum):
    """The direction of a push relative to the authenticated user."""

    SELF = "self"
    OUTGOING = "outgoing"
    INCOMING = "incoming"


# Targets of a new push: the caller picks one of five addressing modes.


class ToAll(_Value):
    """Send to all of the user's devices."""

    kind: Literal["all"] = "all"


class ToDevice(_Value):
    """Send to one of the user's devices."""

    kind: Literal["device"] = "device"
    device: DeviceId


class ToEmail(_Value):
    """Send to a person by email address."""

    kind: Literal["email"] = "email"
    email: EmailAddress


class ToChannel(_Value):
    """Send to every subscriber of a channel."""

    kind: Literal["channel"] = "channel"
    channel_tag: ChannelTag


class ToClient(_Value):
    """Send to every user of an OAuth client."""

    kind: Literal["client"] = "client"
    client: ClientId


NewPushTarget = Annotated[
    ToAll | ToDevice | ToEmail | ToChannel | ToClient,
    Field(discriminator="kind"),
]


# Targets of an existing push: the server only says whether one device was targeted.


class SentBroadcast(_Value):
    """Delivered without a specific target device."""

    kind: Literal["broadcast"] = "broadcast"


class SentToDevice(_Value):
    """Delivered to one specific device."""

    kind: Literal["to_device"] = "to_device"
    device: DeviceId


ExistingPushTarget = Annotated[
    SentBroadcast | SentToDevice,
    Field(discriminator="kind"),
]


class NotePush(_Value):
    """A plain text note."""

    type: Literal["note"] = "note"
    title: str | None = None
    body: str


class LinkPush(_Value):
    """A link with optional title and message."""

    type: Literal["link"] = "link"
    title: str | None = None
    body: str | None = None
    url: Url


class _FileFields(_Value):
    """Fields common to file pushes in both phases."""

    type: Literal["file"] = "file"
    title: str | None = None
    body: str | None = None
    file_name: str
    file_type: MimeType
    file_url: Url


class NewFilePush(_FileFields):
    """A file attachment that has been uploaded but not yet pushed."""


class ExistingFilePush(_FileFields):
    """A pushed file, with thumbnail metadata derived by the server for images."""

    image_url: Url | None = None
    image_width: int | None = None
    image_height: int | None = None


NewPushData = Annotated[
    NotePush | LinkPush | NewFilePush,
    Field(discriminator="type"),
]

ExistingPushData = Annotated[
    NotePush | LinkPush | ExistingFilePush,
    Field(discriminator="type"),
]


class SentByUser(_Value):
    """Sent by a user account, optionally through an OAuth client."""

    kind: Literal["user"] = "user"
    user_id: UserId
    client_id: ClientId | None = None
    email: EmailAddress
    email_normalized: EmailAddress
    name: Name


class SentByChannel(_Value):
    """Sent by a channel."""

    kind: Literal["channel"] = "channel"
    channel_id: ChannelId
    name: Name


PushSender = Annotated[SentByUser | SentByChannel, Field(discriminator="kind")]


class ReceivedByUser(_Value):
    """The user account that received a push."""

    user_id: UserId
    email: EmailAddress
    email_normalized: EmailAddress


PushReceiver = ReceivedByUser


@runtime_checkable
class Push(Protocol):
    """Read-only view of the fields every push has, whatever its phase."""

    phase: ClassVar[PushPhase]

    @property
    def data(self) -> NotePush | LinkPush | NewFilePush | ExistingFilePush: ...

    @property
    def target(self) -> ToAll | ToDevice | ToEmail | ToChannel | ToClient | SentBroadcast | SentToDevice: ...

    @property
    def source_device(self) -> DeviceId | None: ...

    @property
    def guid(self) -> Guid | None: ...


class PushBase(_Value):
    """Phase-invariant fields shared by new and existing pushes."""

    source_device: DeviceId | None = None
    guid: Guid | None = None


class NewPush(PushBase):
    """A push built by the client, ready to be submitted."""

    phase: ClassVar[PushPhase] = PushPhase.NEW

    data: NewPushData
    target: NewPushTarget


class ExistingPush(PushBase):
    """A push as reported by the server."""

    phase: ClassVar[PushPhase] = PushPhase.EXISTING

    data: ExistingPushData
    target: ExistingPushTarget
    id: PushId
    active: bool
    created: PushbulletTime
    modified: PushbulletTime
    dismissed: bool
    direction: PushDirection
    sender: PushSender
    receiver: PushReceiver | None = None


class ExistingPushes(RootModel[tuple[ExistingPush, ...]]):
    """One page of existing pushes, in the order the server returned them."""

    model_config = ConfigDict(frozen=True)

    root: tuple[ExistingPush, ...] = ()

    def __iter__(self) -> Iterator[ExistingPush]:
        return iter(self.root)

    @overload
    def __getitem__(self, index: int) -> ExistingPush: ...

    @overload
    def __getitem__(self, index: slice) -> "ExistingPushes": ...

    def __getitem__(self, index: int | slice) -> "ExistingPush | ExistingPushes":
        if isinstance(index, slice):
            return ExistingPushes(self.root[index])
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)


def simple_new_push(
    target: ToAll | ToDevice | ToEmail | ToChannel | ToClient,
    data: NotePush | LinkPush | NewFilePush,
) -> NewPush:
    """Build a new push with no source device and no guid."""
    return NewPush(data=data, target=target)
