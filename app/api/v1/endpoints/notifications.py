"""Notifications API: inbox, read state, follow request responses."""
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_current_user
from app.models.engagement import Follow
from app.models.user import User
from app.schemas.base import OkResponse
from app.schemas.follow import FollowSummary, RespondRequest, RespondResponse
from app.schemas.notification import MarkedResponse, NotificationResponse, UnreadCountResponse
from app.services import follow_service, notification_service
from app.services.auth_service import user_to_summary

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    rows = await notification_service.list_notifications(db, current_user.id, skip=skip, limit=limit)
    return [
        NotificationResponse(
            id=n.id,
            type=n.type,
            is_read=n.is_read,
            created_at=n.created_at,
            follow_id=follow.id if follow else None,
            actor=user_to_summary(actor) if actor else None,
            follow=_follow_summary(follow) if follow else None,
        )
        for n, actor, follow in rows
    ]


def _follow_summary(follow: Follow) -> FollowSummary:
    return FollowSummary(
        id=follow.id,
        follower_id=follow.follower_id,
        following_id=follow.following_id,
        status=follow.status,
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    count = await notification_service.get_unread_count(db, current_user.id)
    return UnreadCountResponse(count=count)


@router.post("/mark-all-read", response_model=MarkedResponse)
async def mark_all_as_read(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    updated = await notification_service.mark_all_read(db, current_user.id)
    return MarkedResponse(updated=updated)


@router.patch("/{notification_id}/read", response_model=MarkedResponse)
async def mark_one_as_read(
    notification_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    updated = await notification_service.mark_one_read(db, current_user.id, notification_id)
    return MarkedResponse(updated=updated)


@router.post("/{notification_id}/accept", response_model=OkResponse)
async def accept_follow_request(
    notification_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await follow_service.accept_follow_request(db, current_user.id, notification_id)
    return OkResponse()


@router.post("/{notification_id}/decline", response_model=OkResponse)
async def decline_follow_request(
    notification_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    await follow_service.decline_follow_request(db, current_user.id, notification_id)
    return OkResponse()


@router.post("/{notification_id}/respond", response_model=RespondResponse)
async def respond_to_follow_request(
    notification_id: UUID,
    data: RespondRequest | None = Body(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Accept or decline in one call: ``{"action": "accept" | "decline"}``."""
    action = data.action if data else None
    accepted = await follow_service.respond_to_follow_request(db, current_user.id, notification_id, action)
    return RespondResponse(accepted=accepted)
