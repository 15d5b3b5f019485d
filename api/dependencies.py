"""
API dependencies for dependency injection
"""

from typing import Generator, Optional
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import settings
from domain.models import User, get_db_session
from services import SessionService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_session_token(request: Request) -> Optional[str]:
    """Session token from an ``Authorization: Bearer`` header, else the session cookie"""
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        token = auth.split(" ", 1)[1].strip()
        if token:
            return token
    return request.cookies.get(settings.session_cookie_name) or None


def get_current_user(
    session_token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the caller; raises UnauthenticatedError before any route work runs"""
    return SessionService.resolve(db, session_token)
