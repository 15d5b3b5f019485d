"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    ServiceError,
    ServiceValidationError,
    UnauthenticatedError,
    UnauthorizedError,
    NotFoundError,
    AlreadyExistsError,
)

__all__ = [
    "settings",
    "ServiceError",
    "ServiceValidationError",
    "UnauthenticatedError",
    "UnauthorizedError",
    "NotFoundError",
    "AlreadyExistsError",
]
