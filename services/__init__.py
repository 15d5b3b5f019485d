"""Services package - Business logic layer"""

from services.session_service import SessionService
from services.user_service import UserService
from services.meal_service import MealService, MealAccess
from services.metrics_service import compute_adherence_metrics, format_percentage

__all__ = [
    "SessionService",
    "UserService",
    "MealService",
    "MealAccess",
    "compute_adherence_metrics",
    "format_percentage",
]
