from typing import Optional, Tuple
from sqlalchemy.orm import Session
import uuid

from domain.models import User
from repositories import UserRepository
from app.exceptions import NotFoundError, UnauthenticatedError


class SessionService:
    """Issues session tokens and resolves them back to users"""

    @staticmethod
    def new_token() -> str:
        """Opaque session token"""
        return str(uuid.uuid4())

    @staticmethod
    def resolve(db: Session, session_token: Optional[str]) -> User:
        """
        Map a session token to the user currently holding it.

        Raises:
            UnauthenticatedError: token missing, empty or not held by any user
        """
        if not session_token or not session_token.strip():
            raise UnauthenticatedError()

        user = UserRepository(db).get_by_session_token(session_token.strip())
        if user is None:
            raise UnauthenticatedError()
        return user

    @staticmethod
    def create_session(db: Session, email: str) -> Tuple[User, str]:
        """
        Rotate the session token of the user registered with ``email``.

        The previous token stops resolving as soon as this commits. Two
        concurrent renewals both succeed and the last write wins.

        Raises:
            NotFoundError: no user with this email
        """
        user_repo = UserRepository(db)
        user = user_repo.get_by_email(email)
        if user is None:
            raise NotFoundError("User does not exist", details={"email": email})

        token = SessionService.new_token()
        user_repo.set_session_token(user, token)
        return user, token
