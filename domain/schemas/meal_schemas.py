"""Schemas for meal logging and adherence metrics"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List
from datetime import datetime, timezone
from uuid import UUID


class MealCreate(BaseModel):
    """Schema for recording a meal.

    ``date`` and ``isOnDiet`` are accepted as aliases so clients of the
    original JSON API keep working.
    """

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., max_length=2000)
    occurred_at: datetime = Field(
        ..., alias="date", description="When the meal was eaten (caller supplied)"
    )
    is_on_diet: bool = Field(..., alias="isOnDiet")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("occurred_at")
    def to_naive_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class MealUpdate(MealCreate):
    """Full replacement of the editable meal fields"""


class MealResponse(BaseModel):
    id: UUID
    user_id: UUID
    name: str
    description: str
    occurred_at: datetime
    is_on_diet: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MealListResponse(BaseModel):
    meals: List[MealResponse]


class AdherenceMetrics(BaseModel):
    """Snapshot of a user's diet adherence"""

    total_meals: int = Field(..., ge=0)
    on_diet_count: int = Field(..., ge=0)
    off_diet_count: int = Field(..., ge=0)
    best_streak: int = Field(..., ge=0, description="Longest run of on-diet meals")
    current_streak: int = Field(
        ..., ge=0, description="Run of on-diet meals ending at the latest meal"
    )
    adherence_percentage: str = Field(..., description='e.g. "42.86%"')
