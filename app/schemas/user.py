"""Pydantic schemas for User."""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from app.schemas.base import CamelModel


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8)
    display_name: str | None = Field(None, max_length=100)
    role: str = Field(default="TRAINEE", pattern="^(TRAINEE|TRAINER|GYM)$")
    is_private: bool = False


class UserResponse(CamelModel):
    id: UUID
    username: str
    email: str | None = None  # Only in own profile
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    role: str = "TRAINEE"
    is_private: bool = False
    created_at: datetime


class UserSummary(CamelModel):
    """Actor / list entry: ``{id, username, name, image}``."""
    id: UUID
    username: str
    name: str | None = None
    image: str | None = None


class PrivacySettings(CamelModel):
    is_private: bool


class DeleteAccountRequest(BaseModel):
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserResponse


class TokenRefresh(BaseModel):
    refresh_token: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
