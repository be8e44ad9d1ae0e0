"""
Platewise API package.

Provides the FastAPI application for the Platewise nutrition tracking service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
