"""Request types and built-in intent names understood by the skill."""

from enum import Enum


class RequestType(str, Enum):
    """Enumeration of the platform request kinds the router distinguishes."""

    LAUNCH_REQUEST = "LaunchRequest"
    INTENT_REQUEST = "IntentRequest"
    SESSION_ENDED_REQUEST = "SessionEndedRequest"
    OTHER = "Other"

    @classmethod
    def from_type_name(cls, type_name: str) -> "RequestType":
        """Map a raw platform ``type`` string onto a known kind, else ``OTHER``."""
        for member in cls:
            if member is not cls.OTHER and member.value == type_name:
                return member
        return cls.OTHER


class BuiltInIntent(str, Enum):
    """Platform-defined intents handled explicitly by the skill."""

    HELP = "AMAZON.HelpIntent"
    CANCEL = "AMAZON.CancelIntent"
    STOP = "AMAZON.StopIntent"
    FALLBACK = "AMAZON.FallbackIntent"


__all__ = ["RequestType", "BuiltInIntent"]
