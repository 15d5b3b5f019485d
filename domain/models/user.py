"""
User-related database models.
"""

from sqlalchemy import Column, Text, DateTime, Uuid
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base, utcnow


class User(Base):
    """User account model"""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(Text, unique=True, nullable=False)
    # One active token per user; overwritten on every new session
    session_token = Column(Text, unique=True, index=True, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    meals = relationship("Meal", back_populates="user", cascade="all, delete-orphan")
