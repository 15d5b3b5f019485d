from sqlalchemy.orm import Session

from domain.models import User
from repositories import UserRepository
from services.session_service import SessionService
from app.exceptions import AlreadyExistsError


class UserService:
    """Business logic for user registration"""

    @staticmethod
    def register(db: Session, name: str, email: str) -> User:
        """
        Create a user and open their first session.

        The email pre-check gives the common case a clean error; the unique
        constraint in UserRepository.create_user covers concurrent inserts.

        Raises:
            AlreadyExistsError: email already registered; nothing is written
        """
        user_repo = UserRepository(db)
        if user_repo.get_by_email(email) is not None:
            raise AlreadyExistsError("User already exists", details={"email": email})

        return user_repo.create_user(
            name=name, email=email, session_token=SessionService.new_token()
        )
