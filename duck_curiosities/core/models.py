"""Core data transfer objects shared across layers."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from duck_curiosities.core.intents import RequestType

# A translator resolves a message key (plus optional positional format args)
# to a string or, for list-valued keys, an ordered tuple of strings.
LocalizedValue = Union[str, Sequence[str]]
Translator = Callable[..., LocalizedValue]


@dataclass(frozen=True, slots=True)
class SkillEvent:
    """Normalized inbound platform request."""

    request_type: RequestType
    type_name: str
    locale: str
    intent_name: Optional[str] = None
    request_id: Optional[str] = None
    session_id: Optional[str] = None
    reason: Optional[str] = None
    request: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_envelope(cls, data: Mapping[str, Any]) -> "SkillEvent":
        """Build a SkillEvent from a raw platform request envelope."""
        if not isinstance(data, Mapping):
            raise ValueError("request envelope must be a JSON object")
        request = data.get("request")
        if not isinstance(request, Mapping):
            raise ValueError("missing or invalid request body")

        type_name = request.get("type")
        if not isinstance(type_name, str) or not type_name:
            raise ValueError("missing or invalid request type")
        locale = request.get("locale")
        if not isinstance(locale, str) or not locale:
            raise ValueError("missing or invalid request locale")

        request_type = RequestType.from_type_name(type_name)
        intent_name: Optional[str] = None
        if request_type is RequestType.INTENT_REQUEST:
            intent = request.get("intent")
            if not isinstance(intent, Mapping):
                raise ValueError("intent request payload malformed: missing intent field")
            name = intent.get("name")
            if not isinstance(name, str) or not name:
                raise ValueError("intent request received with no intent name")
            intent_name = name

        session = data.get("session")
        session_id = session.get("sessionId") if isinstance(session, Mapping) else None
        request_id = request.get("requestId")
        reason = request.get("reason") if request_type is RequestType.SESSION_ENDED_REQUEST else None

        return cls(
            request_type=request_type,
            type_name=type_name,
            locale=locale,
            intent_name=intent_name,
            request_id=request_id if isinstance(request_id, str) else None,
            session_id=session_id if isinstance(session_id, str) else None,
            reason=reason if isinstance(reason, str) else None,
            request=MappingProxyType(dict(request)),
        )

    def is_intent(self, *names: str) -> bool:
        """True when this is an IntentRequest whose name is one of ``names``."""
        return self.request_type is RequestType.INTENT_REQUEST and self.intent_name in names


@dataclass(frozen=True, slots=True)
class SkillResponse:
    """Spoken response produced once per event."""

    speech: Optional[str] = None
    reprompt: Optional[str] = None
    should_end_session: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        """Return the ``{speech, reprompt?, shouldEndSession?}`` representation."""
        payload: dict[str, Any] = {}
        if self.speech is not None:
            payload["speech"] = self.speech
        if self.reprompt is not None:
            payload["reprompt"] = self.reprompt
        if self.should_end_session is not None:
            payload["shouldEndSession"] = self.should_end_session
        return payload


class ResponseBuilder:
    """Incrementally assemble a :class:`SkillResponse`.

    Adding a reprompt keeps the session open; without one the end-of-session
    flag stays unset and the platform decides.
    """

    def __init__(self) -> None:
        self._speech: Optional[str] = None
        self._reprompt: Optional[str] = None
        self._should_end_session: Optional[bool] = None

    def speak(self, text: str) -> "ResponseBuilder":
        self._speech = text
        return self

    def reprompt(self, text: str) -> "ResponseBuilder":
        self._reprompt = text
        self._should_end_session = False
        return self

    def with_should_end_session(self, value: bool) -> "ResponseBuilder":
        self._should_end_session = value
        return self

    def get_response(self) -> SkillResponse:
        return SkillResponse(
            speech=self._speech,
            reprompt=self._reprompt,
            should_end_session=self._should_end_session,
        )


@dataclass(slots=True)
class RequestContext:
    """Per-event scratch state handed to handlers; never shared across events."""

    locale: str
    translate: Translator
    rng: random.Random = field(default_factory=random.Random)
    correlation_id: Optional[str] = None

    def text(self, key: str, *args: Any) -> str:
        """Resolve ``key`` and require a plain string value."""
        value = self.translate(key, *args)
        if not isinstance(value, str):
            raise TypeError(f"message {key!r} is a list, expected a string")
        return value

    def choices(self, key: str) -> Sequence[str]:
        """Resolve ``key`` and require a list value."""
        value = self.translate(key)
        if isinstance(value, str):
            raise TypeError(f"message {key!r} is a string, expected a list")
        return value


__all__ = [
    "LocalizedValue",
    "Translator",
    "SkillEvent",
    "SkillResponse",
    "ResponseBuilder",
    "RequestContext",
]
