"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.user_schemas import (
    UserCreate,
    SessionCreate,
    UserResponse,
    SessionResponse,
)
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    AdherenceMetrics,
)

__all__ = [
    # User schemas
    "UserCreate",
    "SessionCreate",
    "UserResponse",
    "SessionResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealListResponse",
    "AdherenceMetrics",
]
