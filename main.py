"""Entrypoint for ``uvicorn main:app``."""

from realmhub.main import app, create_app

__all__ = ["app", "create_app"]
