"""
Meal log models.
"""

from sqlalchemy import (
    Column,
    Text,
    Integer,
    DateTime,
    Boolean,
    ForeignKey,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base, utcnow


class Meal(Base):
    """A meal recorded by a user, flagged as on or off diet"""

    __tablename__ = "meals"
    __table_args__ = (
        UniqueConstraint("user_id", "sequence", name="uq_meals_user_sequence"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Per-user insertion counter; registration order for adherence streaks
    sequence = Column(Integer, nullable=False)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    occurred_at = Column(DateTime, nullable=False)
    is_on_diet = Column(Boolean, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)

    user = relationship("User", back_populates="meals")
