"""JSON wire codec for pushes.

Existing pushes are only ever decoded (they come from the server) and new
pushes are only ever encoded (they go to the server). Decoding is all or
nothing: any problem raises a ``PushDecodeError`` subclass naming the key.
"""

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar, assert_never

from pydantic import StrictBool, StrictInt, StrictStr, TypeAdapter, ValidationError

from pushbullet_types.config import get_settings
from pushbullet_types.exceptions import (
    InvalidFieldError,
    MalformedShapeError,
    MissingFieldError,
    PushDecodeError,
    SenderReconstructionError,
    UnrecognizedValueError,
)
from pushbullet_types.identifiers import (
    ChannelId,
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
from pushbullet_types.models.push import (
    ExistingFilePush,
    ExistingPush,
    ExistingPushes,
    LinkPush,
    NewFilePush,
    NewPush,
    NotePush,
    PushDirection,
    ReceivedByUser,
    SentBroadcast,
    SentByChannel,
    SentByUser,
    SentToDevice,
    ToAll,
    ToChannel,
    ToClient,
    ToDevice,
    ToEmail,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TEXT = TypeAdapter(StrictStr)
_BOOL = TypeAdapter(StrictBool)
_INT = TypeAdapter(StrictInt)


def _parse(key: str, value: Any, parser: Callable[[Any], T]) -> T:
    try:
        return parser(value)
    except ValidationError as e:
        raise InvalidFieldError(key, e.errors()[0]["msg"]) from e


def _required(obj: Mapping[str, Any], key: str, parser: Callable[[Any], T]) -> T:
    value = obj.get(key)
    if value is None:
        raise MissingFieldError(key)
    return _parse(key, value, parser)


def _optional(obj: Mapping[str, Any], key: str, parser: Callable[[Any], T]) -> T | None:
    value = obj.get(key)
    if value is None:
        return None
    return _parse(key, value, parser)


def decode_direction(value: Any) -> PushDirection:
    """Decode a push direction from its wire string."""
    if not isinstance(value, str):
        raise InvalidFieldError("direction", "cannot parse push direction from non-string")
    try:
        return PushDirection(value)
    except ValueError:
        raise UnrecognizedValueError("invalid direction string", key="direction", value=value) from None


def encode_direction(direction: PushDirection) -> str:
    """Encode a push direction as its wire string."""
    return direction.value


def _decode_data(obj: Mapping[str, Any]) -> NotePush | LinkPush | ExistingFilePush:
    push_type = _required(obj, "type", lambda v: v)

    if push_type == "note":
        return NotePush(
            title=_optional(obj, "title", _TEXT.validate_python),
            body=_required(obj, "body", _TEXT.validate_python),
        )
    if push_type == "file":
        return ExistingFilePush(
            title=_optional(obj, "file_title", _TEXT.validate_python),
            body=_optional(obj, "body", _TEXT.validate_python),
            file_name=_required(obj, "file_name", _TEXT.validate_python),
            file_type=_required(obj, "file_type", MimeType.model_validate),
            file_url=_required(obj, "file_url", Url.model_validate),
            image_url=_optional(obj, "image_url", Url.model_validate),
            image_width=_optional(obj, "image_width", _INT.validate_python),
            image_height=_optional(obj, "image_height", _INT.validate_python),
        )
    if push_type == "link":
        return LinkPush(
            title=_optional(obj, "title", _TEXT.validate_python),
            body=_optional(obj, "body", _TEXT.validate_python),
            url=_required(obj, "url", Url.model_validate),
        )
    raise UnrecognizedValueError("unrecognized push type", key="type", value=push_type)


def _reconstruct_sender(obj: Mapping[str, Any]) -> SentByUser | SentByChannel:
    """Rebuild the sender from the flat sender_* / channel_iden keys.

    A user sender is tried first, then a channel sender. A payload that
    satisfies both is ambiguous; the user reading wins.
    """
    client = _optional(obj, "client_iden", ClientId.model_validate)
    channel = _optional(obj, "channel_iden", ChannelId.model_validate)
    email = _optional(obj, "sender_email", EmailAddress.model_validate)
    email_normalized = _optional(obj, "sender_email_normalized", EmailAddress.model_validate)
    user = _optional(obj, "sender_iden", UserId.model_validate)
    name = _optional(obj, "sender_name", Name.model_validate)

    by_user = None
    if user is not None and email is not None and email_normalized is not None and name is not None:
        by_user = SentByUser(
            user_id=user,
            client_id=client,
            email=email,
            email_normalized=email_normalized,
            name=name,
        )

    by_channel = None
    if channel is not None and name is not None:
        by_channel = SentByChannel(channel_id=channel, name=name)

    if by_user is not None:
        if by_channel is not None:
            logger.warning(
                f"Push {obj.get('iden')!r} names both a user and a channel sender; using the user"
            )
        return by_user
    if by_channel is not None:
        return by_channel
    raise SenderReconstructionError()


def _reconstruct_receiver(obj: Mapping[str, Any]) -> ReceivedByUser | None:
    user = _optional(obj, "receiver_iden", UserId.model_validate)
    email = _optional(obj, "receiver_email", EmailAddress.model_validate)
    email_normalized = _optional(obj, "receiver_email_normalized", EmailAddress.model_validate)

    if user is None or email is None or email_normalized is None:
        return None
    return ReceivedByUser(user_id=user, email=email, email_normalized=email_normalized)


def _decode_target(obj: Mapping[str, Any]) -> SentBroadcast | SentToDevice:
    device = _optional(obj, "target_device_iden", DeviceId.model_validate)
    if device is None:
        return SentBroadcast()
    return SentToDevice(device=device)


def decode_push(value: Any) -> ExistingPush:
    """Decode one existing push from a parsed JSON object.

    Args:
        value: The JSON value, as produced by ``json.loads``

    Returns:
        The decoded ExistingPush

    Raises:
        PushDecodeError: If any part of the push cannot be decoded
    """
    if not isinstance(value, Mapping):
        raise MalformedShapeError("cannot parse push from non-object")

    data = _decode_data(value)
    sender = _reconstruct_sender(value)
    receiver = _reconstruct_receiver(value)

    return ExistingPush(
        data=data,
        source_device=_optional(value, "source_device_iden", DeviceId.model_validate),
        target=_decode_target(value),
        guid=_optional(value, "guid", Guid.model_validate),
        id=_required(value, "iden", PushId.model_validate),
        active=_required(value, "active", _BOOL.validate_python),
        created=_required(value, "created", PushbulletTime.model_validate),
        modified=_required(value, "modified", PushbulletTime.model_validate),
        dismissed=_required(value, "dismissed", _BOOL.validate_python),
        direction=_required(value, "direction", decode_direction),
        sender=sender,
        receiver=receiver,
    )


def decode_pushes(value: Any, skip_invalid: bool | None = None) -> ExistingPushes:
    """Decode a page of existing pushes from ``{"pushes": [...]}``.

    Args:
        value: The JSON value, as produced by ``json.loads``
        skip_invalid: Drop pushes that fail to decode instead of failing the
            whole page. Defaults to the ``skip_invalid_pushes`` setting.

    Returns:
        ExistingPushes in server order
    """
    if not isinstance(value, Mapping):
        raise MalformedShapeError("cannot parse existing pushes from non-object")

    items = value.get("pushes")
    if items is None:
        raise MissingFieldError("pushes")
    if not isinstance(items, list | tuple):
        raise MalformedShapeError("expected an array of pushes", key="pushes")

    if skip_invalid is None:
        skip_invalid = get_settings().skip_invalid_pushes

    logger.debug(f"Decoding page of {len(items)} pushes")

    pushes = []
    for index, item in enumerate(items):
        try:
            pushes.append(decode_push(item))
        except PushDecodeError as e:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping undecodable push at index {index}: {e}")

    return ExistingPushes(tuple(pushes))


def _loads(raw: str | bytes) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedShapeError(f"invalid JSON: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise MalformedShapeError(f"invalid JSON: {e}") from e


def decode_push_json(raw: str | bytes) -> ExistingPush:
    """Decode one existing push from a JSON document."""
    return decode_push(_loads(raw))


def decode_pushes_json(raw: str | bytes, skip_invalid: bool | None = None) -> ExistingPushes:
    """Decode a page of existing pushes from a JSON document."""
    return decode_pushes(_loads(raw), skip_invalid=skip_invalid)


def _dump(value: Any) -> Any:
    if value is None:
        return None
    return value.model_dump(mode="json")


def _encode_target(target: ToAll | ToDevice | ToEmail | ToChannel | ToClient) -> dict[str, Any]:
    if isinstance(target, ToAll):
        return {}
    if isinstance(target, ToDevice):
        return {"device_iden": _dump(target.device)}
    if isinstance(target, ToEmail):
        return {"email": _dump(target.email)}
    if isinstance(target, ToChannel):
        return {"channel_tag": _dump(target.channel_tag)}
    if isinstance(target, ToClient):
        return {"client_iden": _dump(target.client)}
    assert_never(target)


def _encode_data(data: NotePush | LinkPush | NewFilePush) -> dict[str, Any]:
    if isinstance(data, NotePush):
        return {
            "type": "note",
            "title": data.title,
            "body": data.body,
        }
    if isinstance(data, LinkPush):
        return {
            "type": "link",
            "title": data.title,
            "body": data.body,
            "url": _dump(data.url),
        }
    if isinstance(data, NewFilePush):
        # No title key for files; the service is sent body and file fields only.
        return {
            "type": "file",
            "body": data.body,
            "file_name": data.file_name,
            "file_type": _dump(data.file_type),
            "file_url": _dump(data.file_url),
        }
    assert_never(data)


def encode_push(push: NewPush) -> dict[str, Any]:
    """Encode a new push as the JSON object the service accepts.

    Raises:
        TypeError: If ``push`` is not a NewPush
    """
    if not isinstance(push, NewPush):
        raise TypeError(f"only new pushes can be encoded, got {type(push).__name__}")

    payload: dict[str, Any] = {
        "source_device_iden": _dump(push.source_device),
        "guid": _dump(push.guid),
    }
    payload.update(_encode_target(push.target))
    payload.update(_encode_data(push.data))
    return payload


def encode_push_json(push: NewPush) -> str:
    """Encode a new push as a JSON document."""
    return json.dumps(encode_push(push))
