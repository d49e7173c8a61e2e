"""Request handlers for the Duck Curiosities skill, in dispatch order."""

from __future__ import annotations

from typing import Optional

from duck_curiosities.core.config import config
from duck_curiosities.core.intents import BuiltInIntent, RequestType
from duck_curiosities.core.logging import get_logger
from duck_curiosities.core.models import RequestContext, ResponseBuilder, SkillEvent, SkillResponse
from duck_curiosities.services import localization as messages
from duck_curiosities.services.handler_registry import HandlerEntry, HandlerRegistry

logger = get_logger(__name__)


class LaunchRequestHandler:
    """Greet the user when the skill is opened."""

    name = "LaunchRequestHandler"

    def can_handle(self, event: SkillEvent) -> bool:
        return event.request_type is RequestType.LAUNCH_REQUEST

    def handle(self, event: SkillEvent, context: RequestContext) -> SkillResponse:
        speak_output = context.text(messages.WELCOME_MESSAGE)
        return ResponseBuilder().speak(speak_output).reprompt(speak_output).get_response()


class FactIntentHandler:
    """Tell one duck fact drawn uniformly from the locale's fact list."""

    name = "FactIntentHandler"

    def __init__(self, intent_name: Optional[str] = None) -> None:
        self.intent_name = intent_name or config.FACT_INTENT_NAME

    def can_handle(self, event: SkillEvent) -> bool:
        return event.is_intent(self.intent_name)

    def handle(self, event: SkillEvent, context: RequestContext) -> SkillResponse:
        facts = context.choices(messages.FACTS)
        if not facts:
            raise ValueError(f"no facts available for locale {context.locale!r}")
        fact = context.rng.choice(facts)
        speak_output = (
            context.text(messages.GET_FACTS_MSG)
            + fact
            + "... "
            + context.text(messages.FALLBACK_MESSAGE)
        )
        return (
            ResponseBuilder()
            .speak(speak_output)
            .reprompt(context.text(messages.HELP_MESSAGE))
            .get_response()
        )


class HelpIntentHandler:
    name = "HelpIntentHandler"

    def can_handle(self, event: SkillEvent) -> bool:
        return event.is_intent(BuiltInIntent.HELP.value)

    def handle(self, event: SkillEvent, context: RequestContext) -> SkillResponse:
        speak_output = context.text(messages.HELP_MESSAGE)
        return ResponseBuilder().speak(speak_output).reprompt(speak_output).get_response()


class CancelAndStopIntentHandler:
    """Say goodbye; without a reprompt the platform closes the session."""

    name = "CancelAndStopIntentHandler"

    def can_handle(self, event: SkillEvent) -> bool:
        return event.is_intent(BuiltInIntent.CANCEL.value, BuiltInIntent.STOP.value)

    def handle(self, event: SkillEvent, context: RequestContext) -> SkillResponse:
        return ResponseBuilder().speak(context.text(messages.GOODBYE_MESSAGE)).get_response()


class FallbackIntentHandler:
    name = "FallbackIntentHandler"

    def can_handle(self, event: SkillEvent) -> bool:
        return event.is_intent(BuiltInIntent.FALLBACK.value)

    def handle(self, event: SkillEvent, context: RequestContext) -> SkillResponse:
        speak_output = context.text(messages.FALLBACK_MESSAGE)
        return ResponseBuilder().speak(speak_output).reprompt(speak_output).get_response()


class SessionEndedRequestHandler:
    """Record the end of a session. The response carries no speech."""

    name = "SessionEndedRequestHandler"

    def can_handle(self, event: SkillEvent) -> bool:
        return event.request_type is RequestType.SESSION_ENDED_REQUEST

    def handle(self, event: SkillEvent, context: RequestContext) -> SkillResponse:
        logger.info(
            "Session ended",
            extra={
                "event": "session_ended",
                "session_id": event.session_id,
                "reason": event.reason,
                "error": event.request.get("error"),
            },
        )
        return ResponseBuilder().get_response()


class IntentReflectorHandler:
    """Catch-all for any remaining intent: repeat back the intent name.

    Must stay last in the registry since it accepts every IntentRequest.
    """

    name = "IntentReflectorHandler"

    def can_handle(self, event: SkillEvent) -> bool:
        return event.request_type is RequestType.INTENT_REQUEST

    def handle(self, event: SkillEvent, context: RequestContext) -> SkillResponse:
        speak_output = context.text(messages.REFLECTOR_MESSAGE, event.intent_name)
        return ResponseBuilder().speak(speak_output).get_response()


def default_handlers(fact_intent_name: Optional[str] = None) -> tuple[HandlerEntry, ...]:
    """Return the skill's handler entries in dispatch order."""
    return (
        LaunchRequestHandler(),
        FactIntentHandler(fact_intent_name),
        HelpIntentHandler(),
        CancelAndStopIntentHandler(),
        FallbackIntentHandler(),
        SessionEndedRequestHandler(),
        IntentReflectorHandler(),
    )


def build_default_registry(fact_intent_name: Optional[str] = None) -> HandlerRegistry:
    """Return a registry pre-loaded with :func:`default_handlers`."""
    return HandlerRegistry(default_handlers(fact_intent_name))


__all__ = [
    "LaunchRequestHandler",
    "FactIntentHandler",
    "HelpIntentHandler",
    "CancelAndStopIntentHandler",
    "FallbackIntentHandler",
    "SessionEndedRequestHandler",
    "IntentReflectorHandler",
    "default_handlers",
    "build_default_registry",
]
