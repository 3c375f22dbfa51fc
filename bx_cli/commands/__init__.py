"""Command groups for the bx CLI."""

from .config import app as config_app

__all__ = [
    "config_app",
]
