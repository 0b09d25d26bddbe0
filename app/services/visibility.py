"""Visibility policy: who may see an owner's content.

``can_view`` is the single authority; every read that crosses a privacy
boundary (profile posts, post previews, follower lists) goes through
``ensure_can_view``.
"""
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import PrivateAccount
from app.models.engagement import Follow, FollowStatus
from app.models.user import User


def can_view(
    viewer_id: UUID | None,
    owner_id: UUID,
    owner_is_private: bool,
    edge_status: str | None = None,
) -> bool:
    """True if the owner is public, the viewer is the owner, or viewer -> owner is ACCEPTED."""
    if not owner_is_private:
        return True
    if viewer_id is not None and viewer_id == owner_id:
        return True
    return viewer_id is not None and edge_status == FollowStatus.ACCEPTED.value


async def edge_status(db: AsyncSession, follower_id: UUID | None, following_id: UUID) -> str | None:
    if follower_id is None:
        return None
    result = await db.execute(
        select(Follow.status).where(
            Follow.follower_id == follower_id,
            Follow.following_id == following_id,
        )
    )
    return result.scalar_one_or_none()


async def viewer_can_see(
    db: AsyncSession,
    viewer_id: UUID | None,
    owner: User,
    *,
    is_admin: bool = False,
) -> bool:
    if is_admin:
        return True
    if not owner.is_private or viewer_id == owner.id:
        return can_view(viewer_id, owner.id, owner.is_private)
    status = await edge_status(db, viewer_id, owner.id)
    return can_view(viewer_id, owner.id, owner.is_private, status)


async def ensure_can_view(
    db: AsyncSession,
    viewer_id: UUID | None,
    owner: User,
    *,
    is_admin: bool = False,
) -> None:
    if not await viewer_can_see(db, viewer_id, owner, is_admin=is_admin):
        raise PrivateAccount()
