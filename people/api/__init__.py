"""HTTP API for People Service."""

from .app import app

__all__ = ["app"]
