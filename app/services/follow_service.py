"""Follow edges: create/remove/query, follow requests, follower lists."""
import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import desc, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import InvalidNotification, InvalidOperation, NotFound
from app.models.engagement import Follow, FollowStatus
from app.models.notification import Notification, NotificationType
from app.models.user import User
from app.schemas.follow import FollowAction
from app.services import notification_service
from app.services.auth_service import get_user_by_id
from app.services.visibility import ensure_can_view

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FollowState:
    follower_count: int
    following_count: int
    is_following: bool
    requested: bool = False


async def get_edge(db: AsyncSession, follower_id: UUID, following_id: UUID) -> Follow | None:
    result = await db.execute(
        select(Follow).where(
            Follow.follower_id == follower_id,
            Follow.following_id == following_id,
        )
    )
    return result.scalar_one_or_none()


async def count_followers(db: AsyncSession, user_id: UUID) -> int:
    result = await db.execute(
        select(func.count(Follow.id)).where(
            Follow.following_id == user_id,
            Follow.status == FollowStatus.ACCEPTED.value,
        )
    )
    return result.scalar() or 0


async def count_following(db: AsyncSession, user_id: UUID) -> int:
    result = await db.execute(
        select(func.count(Follow.id)).where(
            Follow.follower_id == user_id,
            Follow.status == FollowStatus.ACCEPTED.value,
        )
    )
    return result.scalar() or 0


async def get_follow_state(db: AsyncSession, viewer_id: UUID | None, target_id: UUID) -> FollowState:
    """Counts (ACCEPTED edges only) for target, plus whether viewer has an edge of any status to it."""
    followers = await count_followers(db, target_id)
    following = await count_following(db, target_id)
    edge = None
    if viewer_id is not None and viewer_id != target_id:
        edge = await get_edge(db, viewer_id, target_id)
    return FollowState(
        follower_count=followers,
        following_count=following,
        is_following=edge is not None,
        requested=edge is not None and not edge.is_accepted,
    )


async def _create_edge(db: AsyncSession, viewer_id: UUID, target: User) -> Follow | None:
    """Insert viewer -> target and fan out the matching notification.

    Returns None when a concurrent request already inserted the pair.
    """
    status = FollowStatus.PENDING if target.is_private else FollowStatus.ACCEPTED
    edge = Follow(follower_id=viewer_id, following_id=target.id, status=status.value)
    try:
        async with db.begin_nested():
            db.add(edge)
    except IntegrityError:
        logger.warning("Follow %s -> %s already exists (concurrent insert), ignoring", viewer_id, target.id)
        return None

    notification_type = NotificationType.FOLLOW_REQUEST if target.is_private else NotificationType.FOLLOWED_YOU
    await notification_service.emit(
        db,
        notification_type=notification_type,
        recipient_id=target.id,
        actor_id=viewer_id,
        follow_id=edge.id,
    )
    logger.info("Follow %s -> %s created (%s)", viewer_id, target.id, status.value)
    return edge


async def _delete_edge(db: AsyncSession, edge: Follow) -> None:
    if not edge.is_accepted:
        # Withdrawing a pending request also clears it from the target's inbox
        await notification_service.retract_follow_request(db, edge)
    await db.delete(edge)
    await db.flush()
    logger.info("Follow %s -> %s removed", edge.follower_id, edge.following_id)


async def set_follow_state(
    db: AsyncSession,
    viewer_id: UUID,
    target_id: UUID,
    action: FollowAction | None = None,
) -> FollowState:
    """Follow, unfollow or toggle viewer -> target. Returns target's state after the mutation.

    ``follow`` and ``unfollow`` are idempotent. Public targets are followed
    immediately (FOLLOWED_YOU); private targets get a PENDING edge
    (FOLLOW_REQUEST).
    """
    if viewer_id == target_id:
        raise InvalidOperation("Cannot follow yourself")
    target = await get_user_by_id(db, target_id)
    if not target:
        raise NotFound("User not found")

    action = action or FollowAction.TOGGLE
    edge = await get_edge(db, viewer_id, target_id)

    if action == FollowAction.FOLLOW:
        if edge is None:
            await _create_edge(db, viewer_id, target)
    elif action == FollowAction.UNFOLLOW:
        if edge is not None:
            await _delete_edge(db, edge)
    elif edge is not None:
        await _delete_edge(db, edge)
    else:
        await _create_edge(db, viewer_id, target)

    await db.flush()
    return await get_follow_state(db, viewer_id, target_id)


async def _load_request(db: AsyncSession, recipient_id: UUID, notification_id: UUID) -> Notification:
    notification = await notification_service.get_notification(db, notification_id)
    if (
        notification is None
        or notification.user_id != recipient_id
        or notification.type != NotificationType.FOLLOW_REQUEST.value
    ):
        raise InvalidNotification()
    return notification


async def _request_edge(db: AsyncSession, recipient_id: UUID, notification_id: UUID) -> tuple[Notification, Follow]:
    notification = await _load_request(db, recipient_id, notification_id)
    if notification.follow_id is None:
        raise InvalidNotification()
    edge = await db.get(Follow, notification.follow_id)
    if edge is None or edge.following_id != recipient_id:
        raise InvalidNotification()
    return notification, edge


async def _accept(db: AsyncSession, notification: Notification, edge: Follow) -> Follow:
    notification.is_read = True
    if edge.is_accepted:
        await db.flush()
        return edge

    edge.status = FollowStatus.ACCEPTED.value
    await db.flush()
    await notification_service.emit(
        db,
        notification_type=NotificationType.REQUEST_ACCEPTED,
        recipient_id=edge.follower_id,
        actor_id=edge.following_id,
        follow_id=edge.id,
    )
    logger.info("Follow request %s -> %s accepted", edge.follower_id, edge.following_id)
    return edge


async def _decline(db: AsyncSession, notification: Notification, edge: Follow) -> None:
    notification.is_read = True
    if not edge.is_accepted:
        await db.delete(edge)
        logger.info("Follow request %s -> %s declined", edge.follower_id, edge.following_id)
    await db.flush()


async def accept_follow_request(db: AsyncSession, recipient_id: UUID, notification_id: UUID) -> Follow:
    """Accept the pending edge behind a FOLLOW_REQUEST notification and tell the requester.

    Accepting an edge that is already ACCEPTED only marks the notification read.
    """
    notification, edge = await _request_edge(db, recipient_id, notification_id)
    return await _accept(db, notification, edge)


async def decline_follow_request(db: AsyncSession, recipient_id: UUID, notification_id: UUID) -> None:
    """Delete the pending edge behind a FOLLOW_REQUEST notification and mark it read.

    An edge that was already accepted is left in place.
    """
    notification, edge = await _request_edge(db, recipient_id, notification_id)
    await _decline(db, notification, edge)


async def respond_to_follow_request(
    db: AsyncSession,
    recipient_id: UUID,
    notification_id: UUID,
    action: str | None,
) -> bool:
    """Dispatch ``accept`` / ``decline``. Returns True if accepted.

    A request whose edge link was cleared falls back to the actor -> recipient
    pair. With no edge left at all the notification is just marked read.
    """
    if action not in ("accept", "decline"):
        raise InvalidOperation("Invalid action")
    notification = await _load_request(db, recipient_id, notification_id)

    edge = await db.get(Follow, notification.follow_id) if notification.follow_id else None
    if edge is None or edge.following_id != recipient_id:
        edge = await get_edge(db, notification.actor_id, recipient_id)
    if edge is None:
        notification.is_read = True
        await db.flush()
        logger.info("Follow request %s has no edge left, marked read", notification.id)
        return False

    if action == "accept":
        await _accept(db, notification, edge)
        return True
    await _decline(db, notification, edge)
    return False


async def remove_follow(db: AsyncSession, follow_id: UUID) -> bool:
    """Administrative removal of any edge."""
    edge = await db.get(Follow, follow_id)
    if edge is None:
        return False
    await _delete_edge(db, edge)
    return True


async def list_followers(
    db: AsyncSession,
    user_id: UUID,
    viewer_id: UUID | None,
    *,
    is_admin: bool = False,
) -> list[User]:
    """Users with an ACCEPTED edge to user_id, newest first. Gated for private accounts."""
    target = await get_user_by_id(db, user_id)
    if not target:
        return []
    await ensure_can_view(db, viewer_id, target, is_admin=is_admin)
    result = await db.execute(
        select(User)
        .join(Follow, Follow.follower_id == User.id)
        .where(Follow.following_id == user_id, Follow.status == FollowStatus.ACCEPTED.value)
        .order_by(desc(Follow.created_at))
    )
    return list(result.scalars().all())


async def list_following(db: AsyncSession, user_id: UUID) -> list[User]:
    """Users that user_id follows (ACCEPTED), newest first."""
    result = await db.execute(
        select(User)
        .join(Follow, Follow.following_id == User.id)
        .where(Follow.follower_id == user_id, Follow.status == FollowStatus.ACCEPTED.value)
        .order_by(desc(Follow.created_at))
    )
    return list(result.scalars().all())


async def list_pending_requests(db: AsyncSession, recipient_id: UUID) -> list[User]:
    """Users waiting for recipient to accept them."""
    result = await db.execute(
        select(User)
        .join(Follow, Follow.follower_id == User.id)
        .where(Follow.following_id == recipient_id, Follow.status == FollowStatus.PENDING.value)
        .order_by(desc(Follow.created_at))
    )
    return list(result.scalars().all())
