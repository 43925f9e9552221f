"""CLI commands for gym-planner."""

from .exercises import exercises
from .generate import generate
from .init import init
from .plans import plans
from .serve import serve

__all__ = [
    "exercises",
    "generate",
    "init",
    "plans",
    "serve",
]
