"""Pydantic schemas for Post."""
from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.user import UserSummary


class PostCreate(CamelModel):
    title: str | None = Field(None, max_length=200)
    content: str = Field(..., min_length=1)
    image_url: str | None = None


class PostListItem(CamelModel):
    id: UUID
    title: str | None = None
    image_url: str | None = None
    created_at: datetime


class PostResponse(PostListItem):
    content: str
    author: UserSummary | None = None


class PostPreviewResponse(CamelModel):
    type: str = "post"
    post: PostResponse
