"""Lifecycle phase of a push."""

from enum import Enum


class PushPhase(str, Enum):
    """Which lifecycle phase a push value belongs to.

    NEW: Built by the client and not yet submitted. Carries no server metadata.
    EXISTING: Confirmed by the server. Carries id, timestamps, sender, etc.
    """

    NEW = "new"
    EXISTING = "existing"
