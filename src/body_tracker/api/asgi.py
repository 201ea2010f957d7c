"""ASGI entrypoint for the body tracker API.

Run with ``uvicorn body_tracker.api.asgi:create_default_app --factory``.
"""

from fastapi import FastAPI

from body_tracker.api.app import create_app
from body_tracker.config import Settings
from body_tracker.containers import build_container


def create_default_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with dependencies wired from settings or the environment."""
    return create_app(build_container(settings))
