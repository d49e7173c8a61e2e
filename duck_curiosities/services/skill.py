"""Skill pipeline: envelope in, spoken response envelope out.

For each event the pipeline binds a correlation id, builds a fresh
:class:`RequestContext` for the event's locale, notifies the event log,
dispatches through the handler registry and serializes the response. Every
error raised on the way is converted into the localized generic error
response; observer failures never affect the outcome.
"""

from __future__ import annotations

import random
import uuid
from typing import Any, Callable, Mapping, Optional

from duck_curiosities.core.api_models import ResponseEnvelope
from duck_curiosities.core.logging import (
    correlation_id_context,
    get_correlation_id,
    get_logger,
)
from duck_curiosities.core.models import RequestContext, ResponseBuilder, SkillEvent, SkillResponse
from duck_curiosities.core.ports import EventLogPort
from duck_curiosities.services.handler_registry import HandlerRegistry
from duck_curiosities.services.localization import (
    ERROR_MESSAGE,
    MessageCatalog,
    resolve,
    translator_for,
)

logger = get_logger(__name__)

# Spoken when even the catalog's error message cannot be resolved.
DEFAULT_ERROR_SPEECH = "Sorry, there was an error. Please try again."


def _request_body(envelope: Mapping[str, Any]) -> Mapping[str, Any]:
    request = envelope.get("request") if isinstance(envelope, Mapping) else None
    return request if isinstance(request, Mapping) else {}


def _envelope_locale(envelope: Mapping[str, Any]) -> Optional[str]:
    locale = _request_body(envelope).get("locale")
    return locale if isinstance(locale, str) else None


def _envelope_request_id(envelope: Mapping[str, Any]) -> Optional[str]:
    request_id = _request_body(envelope).get("requestId")
    return request_id if isinstance(request_id, str) and request_id else None


class SkillPipeline:
    """Route skill events through the registry behind a single error boundary."""

    def __init__(
        self,
        registry: HandlerRegistry,
        catalog: MessageCatalog,
        event_log: Optional[EventLogPort] = None,
        *,
        user_agent: Optional[str] = None,
        rng_factory: Callable[[], random.Random] = random.Random,
    ) -> None:
        self._registry = registry
        self._catalog = catalog
        self._event_log = event_log
        self._user_agent = user_agent
        self._rng_factory = rng_factory

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    @property
    def catalog(self) -> MessageCatalog:
        return self._catalog

    # ------------------------------------------------------------------
    # Public API
    def handle(self, envelope: Mapping[str, Any], *, correlation_id: Optional[str] = None) -> dict:
        """Handle a raw platform envelope and return the response envelope."""

        cid = (
            correlation_id
            or _envelope_request_id(envelope)
            or get_correlation_id()
            or uuid.uuid4().hex
        )
        with correlation_id_context(cid):
            try:
                event = SkillEvent.from_envelope(envelope)
            except ValueError as exc:
                self._observe("log_request", dict(_request_body(envelope)))
                response = self._handle_error(exc, _envelope_locale(envelope), envelope)
                self._observe("log_response", response.to_payload())
            else:
                response = self.process(event, correlation_id=cid)
        return self.to_envelope(response)

    def process(self, event: SkillEvent, *, correlation_id: Optional[str] = None) -> SkillResponse:
        """Dispatch a parsed event, converting any failure into the error response."""

        self._observe("log_request", dict(event.request))
        try:
            context = self.build_context(event, correlation_id=correlation_id)
            response = self._registry.dispatch(event, context)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            response = self._handle_error(exc, event.locale, event.request)
        self._observe("log_response", response.to_payload())
        return response

    def build_context(
        self, event: SkillEvent, *, correlation_id: Optional[str] = None
    ) -> RequestContext:
        """Return a fresh per-event context bound to the event's locale."""

        return RequestContext(
            locale=event.locale,
            translate=translator_for(self._catalog, event.locale),
            rng=self._rng_factory(),
            correlation_id=correlation_id,
        )

    def to_envelope(self, response: SkillResponse) -> dict:
        """Serialize ``response`` into the platform response envelope."""

        return ResponseEnvelope.from_skill_response(
            response, user_agent=self._user_agent
        ).to_wire()

    # ------------------------------------------------------------------
    # Helpers
    def _handle_error(
        self, error: Exception, locale: Optional[str], request: Mapping[str, Any]
    ) -> SkillResponse:
        self._observe("log_error", error, dict(request))
        try:
            speak_output = resolve(self._catalog, locale, ERROR_MESSAGE)
            if not isinstance(speak_output, str):
                raise TypeError(f"message {ERROR_MESSAGE!r} is a list, expected a string")
        except Exception:  # pylint: disable=broad-exception-caught
            logger.error("Unable to resolve the localized error message", exc_info=True)
            speak_output = DEFAULT_ERROR_SPEECH
        return ResponseBuilder().speak(speak_output).reprompt(speak_output).get_response()

    def _observe(self, method: str, *args: Any) -> None:
        if self._event_log is None:
            return
        try:
            getattr(self._event_log, method)(*args)
        except Exception:  # pylint: disable=broad-exception-caught
            # Observers must never change the outcome of an event.
            logger.warning("Event log %s failed", method, exc_info=True)


__all__ = ["SkillPipeline", "DEFAULT_ERROR_SPEECH"]
