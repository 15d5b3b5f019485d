"""User registration and session routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_current_user
from app.config import settings
from domain.models import User
from domain.schemas.user_schemas import (
    UserCreate,
    SessionCreate,
    UserResponse,
    SessionResponse,
)
from domain.mappers import UserMapper
from services import SessionService, UserService

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("dietlog.api.users")


def set_session_cookie(response: Response, session_token: str) -> None:
    response.set_cookie(
        settings.session_cookie_name,
        session_token,
        max_age=settings.session_max_age_seconds,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserCreate, response: Response, db: Session = Depends(get_db)):
    """Register a user and start their first session (cookie)."""
    user = UserService.register(db, payload.name, payload.email)
    set_session_cookie(response, user.session_token)
    logger.info(f"user_registered user_id={user.id}")
    return UserMapper.to_response(user)


@router.post("/session", response_model=SessionResponse)
def create_session(payload: SessionCreate, response: Response, db: Session = Depends(get_db)):
    """Issue a new session token, invalidating the previous one."""
    user, token = SessionService.create_session(db, payload.email)
    set_session_cookie(response, token)
    logger.info(f"session_created user_id={user.id}")
    return UserMapper.to_session_response(user)


@router.get("/me", response_model=UserResponse)
def get_me(user: User = Depends(get_current_user)):
    return UserMapper.to_response(user)
