"""
Meal domain mappers.
"""

from typing import Iterable

from domain.models import Meal
from domain.schemas.meal_schemas import MealResponse, MealListResponse


class MealMapper:
    """Mapper for meal transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        return MealResponse.model_validate(meal)

    @staticmethod
    def to_list_response(meals: Iterable[Meal]) -> MealListResponse:
        return MealListResponse(meals=[MealMapper.to_response(m) for m in meals])
