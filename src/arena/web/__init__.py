"""FastAPI REST API for arena layouts.

Usage:
    uvicorn arena.web:app --reload
"""

from arena.web.app import app, create_app

__all__ = ["app", "create_app"]
