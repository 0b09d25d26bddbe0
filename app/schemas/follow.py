"""Pydantic schemas for follow edges and follow state."""
import enum
from uuid import UUID

from app.schemas.base import CamelModel


class FollowAction(str, enum.Enum):
    FOLLOW = "follow"
    UNFOLLOW = "unfollow"
    TOGGLE = "toggle"


class FollowActionRequest(CamelModel):
    action: FollowAction | None = None


class FollowStateResponse(CamelModel):
    followers: int = 0
    following: int = 0
    is_following: bool = False
    requested: bool = False


class FollowSummary(CamelModel):
    id: UUID
    follower_id: UUID
    following_id: UUID
    status: str


class RespondRequest(CamelModel):
    action: str | None = None


class RespondResponse(CamelModel):
    ok: bool = True
    accepted: bool
