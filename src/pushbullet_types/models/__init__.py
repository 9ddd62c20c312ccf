"""Pydantic models for Pushbullet Types - the push entity in both phases."""

from pushbullet_types.models.push import (
    ExistingFilePush,
    ExistingPush,
    ExistingPushData,
    ExistingPushes,
    ExistingPushTarget,
    LinkPush,
    NewFilePush,
    NewPush,
    NewPushData,
    NewPushTarget,
    NotePush,
    Push,
    PushBase,
    PushDirection,
    PushReceiver,
    PushSender,
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
    simple_new_push,
)

__all__ = [
    "ExistingFilePush",
    "ExistingPush",
    "ExistingPushData",
    "ExistingPushes",
    "ExistingPushTarget",
    "LinkPush",
    "NewFilePush",
    "NewPush",
    "NewPushData",
    "NewPushTarget",
    "NotePush",
    "Push",
    "PushBase",
    "PushDirection",
    "PushReceiver",
    "PushSender",
    "ReceivedByUser",
    "SentBroadcast",
    "SentByChannel",
    "SentByUser",
    "SentToDevice",
    "simple_new_push",
    "ToAll",
    "ToChannel",
    "ToClient",
    "ToDevice",
    "ToEmail",
]
