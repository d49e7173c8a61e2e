"""Infrastructure adapter exports."""

from .event_log import JsonEventLogAdapter

__all__ = ["JsonEventLogAdapter"]
