from enum import Enum
from typing import List
from uuid import UUID
from sqlalchemy.orm import Session

from domain.models import Meal, User, utcnow
from domain.schemas.meal_schemas import MealCreate, MealUpdate, AdherenceMetrics
from repositories import MealRepository
from services.metrics_service import compute_adherence_metrics
from app.exceptions import NotFoundError, UnauthorizedError


class MealAccess(str, Enum):
    """What the caller intends to do with a meal"""

    READ = "read"
    WRITE = "write"


class MealService:
    """Business logic for the owner-scoped meal log"""

    @staticmethod
    def authorize(db: Session, owner: User, meal_id: UUID, access: MealAccess) -> Meal:
        """
        Load a meal for ``owner`` or fail.

        This is the only ownership check in the ledger. A meal that does not
        exist and a meal that belongs to someone else fail identically:
        NotFoundError for reads, UnauthorizedError for writes.
        """
        meal = MealRepository(db).get_owned(meal_id, owner.id)
        if meal is not None:
            return meal

        if access is MealAccess.WRITE:
            raise UnauthorizedError(details={"meal_id": str(meal_id)})
        raise NotFoundError("Meal not found", details={"meal_id": str(meal_id)})

    @staticmethod
    def create(db: Session, owner: User, data: MealCreate) -> Meal:
        meal = Meal(
            user_id=owner.id,
            name=data.name,
            description=data.description,
            occurred_at=data.occurred_at,
            is_on_diet=data.is_on_diet,
        )
        return MealRepository(db).create_meal(meal)

    @staticmethod
    def get(db: Session, owner: User, meal_id: UUID) -> Meal:
        return MealService.authorize(db, owner, meal_id, MealAccess.READ)

    @staticmethod
    def list(db: Session, owner: User) -> List[Meal]:
        """All of the owner's meals, most recent ``occurred_at`` first"""
        return MealRepository(db).list_by_user(owner.id)

    @staticmethod
    def update(db: Session, owner: User, meal_id: UUID, data: MealUpdate) -> Meal:
        """
        Overwrite the editable fields of an owned meal.

        ``updated_at`` is refreshed even when every value is unchanged;
        ``id``, ``user_id`` and ``created_at`` never move.
        """
        meal = MealService.authorize(db, owner, meal_id, MealAccess.WRITE)
        meal.name = data.name
        meal.description = data.description
        meal.occurred_at = data.occurred_at
        meal.is_on_diet = data.is_on_diet
        meal.updated_at = utcnow()
        return MealRepository(db).update(meal)

    @staticmethod
    def delete(db: Session, owner: User, meal_id: UUID) -> None:
        meal = MealService.authorize(db, owner, meal_id, MealAccess.WRITE)
        MealRepository(db).delete_meal(meal)

    @staticmethod
    def metrics(db: Session, owner: User) -> AdherenceMetrics:
        """Adherence snapshot over the owner's meals in registration order"""
        meals = MealRepository(db).list_by_user_in_registration_order(owner.id)
        return compute_adherence_metrics(meals)
