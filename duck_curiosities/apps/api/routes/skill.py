"""Skill endpoint receiving platform request envelopes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request, status

from duck_curiosities.services import ServiceContainer
from duck_curiosities.services.skill import SkillPipeline

router = APIRouter(tags=["skill"])


def _get_pipeline(request: Request) -> SkillPipeline:
    services = getattr(request.app.state, "services", None)
    if not isinstance(services, ServiceContainer) or services.pipeline is None:
        raise RuntimeError("Skill pipeline is not configured on app.state.")
    return services.pipeline


@router.post("/skill")
async def skill_webhook(request: Request) -> dict[str, Any]:
    """Handle one platform request envelope and return the response envelope.

    Handler failures still produce a spoken error response with status 200;
    only an unreadable body is rejected.
    """
    try:
        body = await request.json()
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError both derive from ValueError
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON body"
        ) from exc

    pipeline = _get_pipeline(request)
    return pipeline.handle(body)


__all__ = ["router"]
