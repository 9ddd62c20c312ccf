"""Pushbullet Types - push entity model and JSON wire codec."""

from pushbullet_types.codec import (
    decode_direction,
    decode_push,
    decode_push_json,
    decode_pushes,
    decode_pushes_json,
    encode_direction,
    encode_push,
    encode_push_json,
)
from pushbullet_types.exceptions import (
    InvalidFieldError,
    MalformedShapeError,
    MissingFieldError,
    PushDecodeError,
    SenderReconstructionError,
    UnrecognizedValueError,
)
from pushbullet_types.identifiers import PushId
from pushbullet_types.models import ExistingPush, ExistingPushes, NewPush, simple_new_push
from pushbullet_types.phase import PushPhase

__version__ = "0.1.0"

__all__ = [
    "decode_direction",
    "decode_push",
    "decode_push_json",
    "decode_pushes",
    "decode_pushes_json",
    "encode_direction",
    "encode_push",
    "encode_push_json",
    "ExistingPush",
    "ExistingPushes",
    "InvalidFieldError",
    "MalformedShapeError",
    "MissingFieldError",
    "NewPush",
    "PushDecodeError",
    "PushId",
    "PushPhase",
    "SenderReconstructionError",
    "simple_new_push",
    "UnrecognizedValueError",
]
