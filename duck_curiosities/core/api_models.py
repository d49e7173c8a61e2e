"""Wire models for the platform response envelope."""

from __future__ import annotations

from typing import Any, Literal
from xml.sax.saxutils import escape

from pydantic import BaseModel, ConfigDict, Field

from duck_curiosities.core.models import SkillResponse


class OutputSpeech(BaseModel):
    """SSML speech block."""

    type: Literal["SSML"] = "SSML"
    ssml: str

    @classmethod
    def from_text(cls, text: str) -> "OutputSpeech":
        return cls(ssml=f"<speak>{escape(text)}</speak>")


class Reprompt(BaseModel):
    """Speech replayed when the user stays silent."""

    model_config = ConfigDict(populate_by_name=True)

    output_speech: OutputSpeech = Field(..., alias="outputSpeech")


class ResponseBody(BaseModel):
    """Body of the outbound envelope; every field is optional on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    output_speech: OutputSpeech | None = Field(default=None, alias="outputSpeech")
    reprompt: Reprompt | None = None
    should_end_session: bool | None = Field(default=None, alias="shouldEndSession")


class ResponseEnvelope(BaseModel):
    """Full response envelope returned to the voice platform."""

    model_config = ConfigDict(populate_by_name=True)

    version: str = "1.0"
    session_attributes: dict[str, Any] = Field(default_factory=dict, alias="sessionAttributes")
    user_agent: str | None = Field(default=None, alias="userAgent")
    response: ResponseBody

    @classmethod
    def from_skill_response(
        cls, skill_response: SkillResponse, *, user_agent: str | None = None
    ) -> "ResponseEnvelope":
        body = ResponseBody(
            output_speech=(
                OutputSpeech.from_text(skill_response.speech)
                if skill_response.speech is not None
                else None
            ),
            reprompt=(
                Reprompt(output_speech=OutputSpeech.from_text(skill_response.reprompt))
                if skill_response.reprompt is not None
                else None
            ),
            should_end_session=skill_response.should_end_session,
        )
        return cls(response=body, user_agent=user_agent)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with platform field names, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["OutputSpeech", "Reprompt", "ResponseBody", "ResponseEnvelope"]
