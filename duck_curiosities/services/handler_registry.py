"""Ordered handler registry and the handler protocol it dispatches to."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, runtime_checkable

from duck_curiosities.core.exceptions import (
    HandlerExecutionError,
    NoHandlerMatchedError,
    SkillError,
)
from duck_curiosities.core.logging import get_logger
from duck_curiosities.core.models import RequestContext, SkillEvent, SkillResponse

logger = get_logger(__name__)


@runtime_checkable
class HandlerEntry(Protocol):
    """A predicate paired with the action run when it matches."""

    name: str

    def can_handle(self, event: SkillEvent) -> bool:
        """Return True if this entry should handle ``event``. Must be side-effect free."""
        ...

    def handle(self, event: SkillEvent, context: RequestContext) -> SkillResponse:
        """Build the response for ``event``."""
        ...


class HandlerRegistry:
    """Try handler entries in registration order; the first match wins."""

    def __init__(self, entries: Iterable[HandlerEntry] = ()) -> None:
        self._entries: list[HandlerEntry] = list(entries)

    def register(self, entry: HandlerEntry, *, before: Optional[str] = None) -> None:
        """Append ``entry``, or insert it ahead of the entry named ``before``."""

        if before is None:
            self._entries.append(entry)
            return
        for index, existing in enumerate(self._entries):
            if existing.name == before:
                self._entries.insert(index, entry)
                return
        raise KeyError(f"No handler named {before!r} is registered")

    def select(self, event: SkillEvent) -> HandlerEntry:
        """Return the first entry whose predicate accepts ``event``."""

        for entry in self._entries:
            if entry.can_handle(event):
                return entry
        raise NoHandlerMatchedError(event)

    def dispatch(self, event: SkillEvent, context: RequestContext) -> SkillResponse:
        """Run the selected handler for ``event`` and return its response."""

        entry = self.select(event)
        logger.debug("Dispatching %s to %s", event.type_name, entry.name)
        try:
            return entry.handle(event, context)
        except SkillError:
            raise
        except Exception as exc:
            raise HandlerExecutionError(entry.name, exc) from exc

    def entries(self) -> tuple[HandlerEntry, ...]:
        """Return the registered entries in dispatch order."""

        return tuple(self._entries)


__all__ = ["HandlerEntry", "HandlerRegistry"]
