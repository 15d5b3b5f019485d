"""Meal log and adherence metrics routes.

Every route resolves the caller from the session token first; an
unresolvable token ends the request with 401 before any meal is touched.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from api.dependencies import get_db, get_current_user
from domain.models import User
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealListResponse,
    AdherenceMetrics,
)
from domain.mappers import MealMapper
from services import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("dietlog.api.meals")


@router.post("", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def create_meal(
    payload: MealCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    meal = MealService.create(db, user, payload)
    logger.info(f"meal_created user_id={user.id} meal_id={meal.id} on_diet={meal.is_on_diet}")
    return MealMapper.to_response(meal)


@router.get("", response_model=MealListResponse)
def list_meals(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """All of the caller's meals, newest first."""
    meals = MealService.list(db, user)
    return MealMapper.to_list_response(meals)


# Registered before /{meal_id} so "metrics" is never parsed as a meal id
@router.get("/metrics", response_model=AdherenceMetrics)
def get_metrics(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Adherence metrics for the caller.

    Returns total, on-diet and off-diet counts, the best and current on-diet
    streaks (in the order meals were recorded) and the on-diet percentage.
    """
    metrics = MealService.metrics(db, user)
    logger.info(
        f"metrics_computed user_id={user.id} total={metrics.total_meals} "
        f"best_streak={metrics.best_streak}"
    )
    return metrics


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(
    meal_id: UUID,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return MealMapper.to_response(MealService.get(db, user, meal_id))


@router.put("/{meal_id}", response_model=MealResponse)
def update_meal(
    meal_id: UUID,
    payload: MealUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    meal = MealService.update(db, user, meal_id, payload)
    logger.info(f"meal_updated user_id={user.id} meal_id={meal_id}")
    return MealMapper.to_response(meal)


@router.delete("/{meal_id}")
def delete_meal(
    meal_id: UUID,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    MealService.delete(db, user, meal_id)
    logger.info(f"meal_deleted user_id={user.id} meal_id={meal_id}")
    return {"message": "Meal deleted", "deleted": str(meal_id)}
