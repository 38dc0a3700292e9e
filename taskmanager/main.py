"""
Entry point ASGI.

    uvicorn taskmanager.main:app --reload
"""

from .api.main import app

__all__ = ["app"]
