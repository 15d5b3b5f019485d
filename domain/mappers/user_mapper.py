"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas.user_schemas import UserResponse, SessionResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """
        Convert User ORM model to UserResponse DTO.

        The session token is deliberately left out; it only travels in the
        session cookie or in SessionResponse.
        """
        return UserResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_session_response(user: User) -> SessionResponse:
        return SessionResponse(user_id=user.id, session_token=user.session_token)
