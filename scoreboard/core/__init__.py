"""Core infrastructure: settings, logging, exceptions."""

from .config import settings
from .exceptions import (
    AppException,
    BadRequestError,
    NotFoundError,
    ValidationError,
)
from .logging import get_logger, setup_logging


__all__ = [
    "AppException",
    "BadRequestError",
    "NotFoundError",
    "ValidationError",
    "get_logger",
    "settings",
    "setup_logging",
]
