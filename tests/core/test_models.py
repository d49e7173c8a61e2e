"""Tests for core data models."""

from __future__ import annotations

import pytest

from duck_curiosities.core.intents import RequestType
from duck_curiosities.core.models import ResponseBuilder, SkillEvent, SkillResponse


def test_from_envelope_parses_intent_request(make_envelope):
    event = SkillEvent.from_envelope(make_envelope(intent="FrasesIntent", locale="es-ES"))

    assert event.request_type is RequestType.INTENT_REQUEST
    assert event.type_name == "IntentRequest"
    assert event.intent_name == "FrasesIntent"
    assert event.locale == "es-ES"
    assert event.request_id == "amzn1.echo-api.request.test"
    assert event.session_id == "amzn1.echo-api.session.test"


def test_from_envelope_keeps_unknown_type_name(make_envelope):
    event = SkillEvent.from_envelope(make_envelope("CanFulfillIntentRequest"))

    assert event.request_type is RequestType.OTHER
    assert event.type_name == "CanFulfillIntentRequest"
    assert event.intent_name is None


def test_from_envelope_reads_session_end_reason(make_envelope):
    event = SkillEvent.from_envelope(make_envelope("SessionEndedRequest", reason="USER_INITIATED"))

    assert event.request_type is RequestType.SESSION_ENDED_REQUEST
    assert event.reason == "USER_INITIATED"


def test_event_is_immutable(make_envelope):
    event = SkillEvent.from_envelope(make_envelope("LaunchRequest"))

    with pytest.raises(AttributeError):
        event.locale = "fr-FR"  # type: ignore[misc]
    with pytest.raises(TypeError):
        event.request["locale"] = "fr-FR"  # type: ignore[index]


@pytest.mark.parametrize(
    "mutate, message",
    [
        (lambda env: env.pop("request"), "request body"),
        (lambda env: env["request"].pop("type"), "request type"),
        (lambda env: env["request"].pop("locale"), "locale"),
        (lambda env: env["request"].pop("intent"), "intent field"),
        (lambda env: env["request"]["intent"].update(name=""), "intent name"),
    ],
)
def test_from_envelope_rejects_malformed_payloads(make_envelope, mutate, message):
    envelope = make_envelope(intent="AMAZON.HelpIntent")
    mutate(envelope)

    with pytest.raises(ValueError, match=message):
        SkillEvent.from_envelope(envelope)


def test_from_envelope_rejects_non_mapping():
    with pytest.raises(ValueError):
        SkillEvent.from_envelope(["not", "an", "envelope"])  # type: ignore[arg-type]


def test_is_intent_requires_intent_request(make_envelope):
    launch = SkillEvent.from_envelope(make_envelope("LaunchRequest"))
    stop = SkillEvent.from_envelope(make_envelope(intent="AMAZON.StopIntent"))

    assert not launch.is_intent("AMAZON.StopIntent")
    assert stop.is_intent("AMAZON.CancelIntent", "AMAZON.StopIntent")


def test_response_builder_reprompt_keeps_session_open():
    response = ResponseBuilder().speak("Hi").reprompt("Still there?").get_response()

    assert response == SkillResponse(speech="Hi", reprompt="Still there?", should_end_session=False)


def test_response_builder_without_reprompt_leaves_session_flag_unset():
    response = ResponseBuilder().speak("Goodbye!").get_response()

    assert response.reprompt is None
    assert response.should_end_session is None
    assert response.to_payload() == {"speech": "Goodbye!"}


def test_empty_response_payload():
    assert ResponseBuilder().get_response().to_payload() == {}
