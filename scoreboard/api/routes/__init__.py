"""API routes package."""

from . import health, scoring


__all__ = [
    "health",
    "scoring",
]
