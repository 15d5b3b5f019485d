"""
Meal Repository - Data access layer for the meal log
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import Meal

# Concurrent inserts for one user can race on the same sequence number
SEQUENCE_ATTEMPTS = 3


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def next_sequence(self, user_id: UUID) -> int:
        """Next per-user insertion number, starting at 1"""
        current = (
            self.db.query(func.max(Meal.sequence))
            .filter(Meal.user_id == user_id)
            .scalar()
        )
        return (current or 0) + 1

    def create_meal(self, meal: Meal) -> Meal:
        """Insert a meal at the end of its owner's registration order"""
        for attempt in range(1, SEQUENCE_ATTEMPTS + 1):
            meal.sequence = self.next_sequence(meal.user_id)
            try:
                return self.create(meal)
            except IntegrityError:
                self.db.rollback()
                if attempt == SEQUENCE_ATTEMPTS:
                    raise

    def get_owned(self, meal_id: UUID, user_id: UUID) -> Optional[Meal]:
        """Get a meal only if it belongs to the given user"""
        return (
            self.db.query(Meal)
            .filter(Meal.id == meal_id, Meal.user_id == user_id)
            .first()
        )

    def list_by_user(self, user_id: UUID) -> List[Meal]:
        """All meals of a user, most recent occurrence first"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.occurred_at.desc(), Meal.sequence.desc())
            .all()
        )

    def list_by_user_in_registration_order(self, user_id: UUID) -> List[Meal]:
        """All meals of a user in the order they were inserted"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.sequence.asc())
            .all()
        )

    def delete_meal(self, meal: Meal) -> None:
        """Permanently remove a loaded meal"""
        self.db.delete(meal)
        self.db.commit()
