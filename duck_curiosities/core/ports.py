"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Any, Mapping, Protocol


class EventLogPort(Protocol):
    """Port receiving structured records around each handled event."""

    def log_request(self, payload: Mapping[str, Any]) -> None:
        """Record the inbound request before dispatch."""
        ...

    def log_response(self, payload: Mapping[str, Any]) -> None:
        """Record the outbound response after it was produced."""
        ...

    def log_error(self, error: BaseException, payload: Mapping[str, Any]) -> None:
        """Record an error that was converted into a fallback response."""
        ...


__all__ = ["EventLogPort"]
