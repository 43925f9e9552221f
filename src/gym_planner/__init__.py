"""gym-planner: multi-week workout plan generator."""

__version__ = "0.1.0"
