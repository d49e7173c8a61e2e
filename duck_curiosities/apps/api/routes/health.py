"""Health and readiness routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/")
def read_root() -> dict[str, str]:
    """Health/info endpoint with a short usage message."""
    return {"message": "Duck Curiosities skill endpoint. POST request envelopes to /skill."}


@router.get("/alive")
async def alive_check() -> JSONResponse:
    """Health check endpoint for infrastructure probes."""
    return JSONResponse({"status": "ok", "message": "Duck Curiosities is alive and healthy."})


__all__ = ["router"]
