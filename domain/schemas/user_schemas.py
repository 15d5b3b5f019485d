"""Schemas for registration and session requests"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime
from uuid import UUID


class UserCreate(BaseModel):
    """Schema for registering a new user"""

    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    email: EmailStr

    @field_validator("email")
    def normalize_email(cls, v):
        return v.lower().strip()


class SessionCreate(BaseModel):
    """Schema for requesting a new session token"""

    email: EmailStr

    @field_validator("email")
    def normalize_email(cls, v):
        return v.lower().strip()


class UserResponse(BaseModel):
    id: UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class SessionResponse(BaseModel):
    user_id: UUID
    session_token: str
