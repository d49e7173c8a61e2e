"""Top-level FastAPI entrypoint; serve ``main:app`` with an ASGI server."""

from duck_curiosities.api_factory import create_app

app = create_app()

__all__ = ["app"]
