"""Serverless entrypoint feeding platform envelopes to the skill pipeline."""

from __future__ import annotations

from typing import Any

from duck_curiosities.bootstrap import build_default_service_container
from duck_curiosities.core.logging import get_logger
from duck_curiosities.services import ServiceContainer, runtime

logger = get_logger(__name__)


def _services() -> ServiceContainer:
    try:
        return runtime.get_services()
    except RuntimeError:
        services = build_default_service_container()
        runtime.set_services(services)
        logger.info("Initialized skill services for the serverless runtime.")
        return services


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda entrypoint."""
    pipeline = _services().pipeline
    if pipeline is None:
        raise RuntimeError("Skill pipeline is not configured.")
    request_id = getattr(context, "aws_request_id", None) if context else None
    return pipeline.handle(event, correlation_id=request_id)


__all__ = ["lambda_handler"]
