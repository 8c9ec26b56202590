"""Core utilities and shared functionality."""

from transaction_app.core.timezone import now, localize, get_zone, DEFAULT_TZ
from transaction_app.core.exceptions import (
    AppError,
    ValidationError,
    DuplicateKeyError,
    NotFoundError,
    InternalError,
)

__all__ = [
    "now",
    "localize",
    "get_zone",
    "DEFAULT_TZ",
    "AppError",
    "ValidationError",
    "DuplicateKeyError",
    "NotFoundError",
    "InternalError",
]
