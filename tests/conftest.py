"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honored.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Callable, Optional

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Keep test runs from writing rotating log files
os.environ.setdefault("DUCK_LOG_TO_FILE", "false")

EnvelopeFactory = Callable[..., dict[str, Any]]


@pytest.fixture
def make_envelope() -> EnvelopeFactory:
    """Return a builder for platform request envelopes."""

    def _make(
        request_type: str = "IntentRequest",
        *,
        intent: Optional[str] = None,
        locale: str = "en-US",
        request_id: str = "amzn1.echo-api.request.test",
        **extra: Any,
    ) -> dict[str, Any]:
        request: dict[str, Any] = {
            "type": request_type,
            "requestId": request_id,
            "locale": locale,
            "timestamp": "2026-10-19T12:00:00Z",
        }
        if intent is not None:
            request["intent"] = {"name": intent, "confirmationStatus": "NONE"}
        request.update(extra)
        return {
            "version": "1.0",
            "session": {"new": True, "sessionId": "amzn1.echo-api.session.test"},
            "context": {},
            "request": request,
        }

    return _make
