"""Pydantic schemas for Notification."""
from datetime import datetime
from uuid import UUID

from app.schemas.base import CamelModel
from app.schemas.follow import FollowSummary
from app.schemas.user import UserSummary


class NotificationResponse(CamelModel):
    id: UUID
    type: str
    is_read: bool = False
    created_at: datetime
    follow_id: UUID | None = None
    actor: UserSummary | None = None
    follow: FollowSummary | None = None


class UnreadCountResponse(CamelModel):
    count: int = 0


class MarkedResponse(CamelModel):
    updated: int | bool
