"""FastAPI web front-end serving the admin pages."""

from .app import create_app

__all__ = ["create_app"]
