"""Application service layer scaffolding for skill event handling."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from duck_curiosities.core.ports import EventLogPort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .handler_registry import HandlerRegistry
    from .localization import MessageCatalog
    from .skill import SkillPipeline


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to entrypoints."""

    event_log: Optional[EventLogPort] = None
    catalog: Optional["MessageCatalog"] = None
    registry: Optional["HandlerRegistry"] = None
    pipeline: Optional["SkillPipeline"] = None


def build_default_services(
    *,
    event_log_port: Optional[EventLogPort] = None,
    catalog: Optional["MessageCatalog"] = None,
    rng_factory: Callable[[], random.Random] = random.Random,
) -> ServiceContainer:
    """Return a service container with the default handler registry wiring."""

    # pylint: disable=import-outside-toplevel
    from duck_curiosities.core.config import config

    from .handlers import build_default_registry
    from .localization import get_default_catalog
    from .skill import SkillPipeline

    resolved_catalog = catalog if catalog is not None else get_default_catalog()
    registry = build_default_registry(config.FACT_INTENT_NAME)
    pipeline = SkillPipeline(
        registry,
        resolved_catalog,
        event_log_port,
        user_agent=config.SKILL_USER_AGENT,
        rng_factory=rng_factory,
    )
    return ServiceContainer(
        event_log=event_log_port,
        catalog=resolved_catalog,
        registry=registry,
        pipeline=pipeline,
    )


__all__ = ["ServiceContainer", "build_default_services"]
