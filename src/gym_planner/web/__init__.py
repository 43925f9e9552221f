"""Web interface for gym-planner."""

from .app import create_app

__all__ = ["create_app"]
