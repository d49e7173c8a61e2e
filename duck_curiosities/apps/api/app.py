"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from duck_curiosities.apps.api.middleware import CorrelationIdMiddleware
from duck_curiosities.core.logging import get_logger
from duck_curiosities.services import ServiceContainer
from duck_curiosities.services import runtime

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Register the app's service container for the lifetime of the process."""
    logger.info("Initializing duck curiosities skill...")
    services = getattr(app.state, "services", None)
    if isinstance(services, ServiceContainer):
        runtime.set_services(services)
        if services.catalog is not None:
            logger.info("Message catalog version %s ready.", services.catalog.version)
    yield


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(lifespan=lifespan)
    app.state.services = services
    runtime.set_services(services)
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, skill  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(skill.router)
    return app


__all__ = ["create_app", "lifespan"]
