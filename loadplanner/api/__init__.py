"""
FastAPI application for the ULD Load Planner.

Provides REST endpoints for:
- Aircraft deck profiles
- ULD catalog and width resolution
- Load planning and text reports
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
