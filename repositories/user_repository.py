"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import AlreadyExistsError


def normalize_email(email: str) -> str:
    """Emails are stored and matched lowercased and stripped"""
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email, ignoring case"""
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def get_by_session_token(self, session_token: str) -> Optional[User]:
        """Get the user whose current session token matches"""
        return (
            self.db.query(User).filter(User.session_token == session_token).first()
        )

    def create_user(self, name: str, email: str, session_token: Optional[str] = None) -> User:
        """Create a new user; a duplicate email raises AlreadyExistsError"""
        email = normalize_email(email)
        user = User(name=name, email=email, session_token=session_token)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise AlreadyExistsError(
                "User already exists", details={"email": email}
            )

    def set_session_token(self, user: User, session_token: str) -> User:
        """Replace the user's session token (last write wins)"""
        user.session_token = session_token
        return self.update(user)
