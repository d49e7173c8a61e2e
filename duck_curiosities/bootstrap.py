"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from duck_curiosities.adapters.event_log import JsonEventLogAdapter
from duck_curiosities.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    return build_default_services(event_log_port=JsonEventLogAdapter())


__all__ = ["build_default_service_container"]
