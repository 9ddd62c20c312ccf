"""Custom exceptions for Pushbullet Types."""


class PushDecodeError(ValueError):
    """Raised when a JSON document cannot be decoded into a push value."""

    def __init__(self, reason: str, key: str | None = None) -> None:
        self.reason = reason
        self.key = key
        if key is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} (key={key!r})")


class MalformedShapeError(PushDecodeError):
    """Raised when a JSON value is not the object or array that was expected."""


class MissingFieldError(PushDecodeError):
    """Raised when a required key is absent or null."""

    def __init__(self, key: str) -> None:
        super().__init__("missing required field", key=key)


class InvalidFieldError(PushDecodeError):
    """Raised when a key holds a value of the wrong JSON type."""

    def __init__(self, key: str, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid value: {detail}", key=key)


class UnrecognizedValueError(PushDecodeError):
    """Raised when a discriminator string is outside its known set."""

    def __init__(self, reason: str, key: str, value: object) -> None:
        self.value = value
        super().__init__(f"{reason}: {value!r}", key=key)


class SenderReconstructionError(PushDecodeError):
    """Raised when a push matches neither the user nor the channel sender shape."""

    def __init__(self) -> None:
        super().__init__("push not sent by channel or by user")
