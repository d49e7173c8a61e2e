"""Core exception types shared across layers."""

from __future__ import annotations

from typing import Any


class SkillError(Exception):
    """Base class for errors raised while handling a skill event."""


class NoHandlerMatchedError(SkillError):
    """Raised when no registered handler accepts an event."""

    def __init__(self, event: Any) -> None:
        self.event = event
        type_name = getattr(event, "type_name", type(event).__name__)
        super().__init__(f"No handler matched request type {type_name!r}")


class UnknownLocalizationKeyError(SkillError, KeyError):
    """Raised when a message key is absent from both the requested and fallback locale."""

    def __init__(self, key: str, locale: str) -> None:
        self.key = key
        self.locale = locale
        super().__init__(f"Unknown localization key {key!r} for locale {locale!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class HandlerExecutionError(SkillError):
    """Raised when a matched handler fails while building its response."""

    def __init__(self, handler: str, original: BaseException) -> None:
        self.handler = handler
        self.original = original
        super().__init__(f"Handler {handler} failed: {original!r}")


__all__ = [
    "SkillError",
    "NoHandlerMatchedError",
    "UnknownLocalizationKeyError",
    "HandlerExecutionError",
]
