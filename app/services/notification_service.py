"""Notification creation and queries.

Notifications are append-only records owned by their recipient. The only
state transition is ``is_read: False -> True``.
"""
import logging
from uuid import UUID

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.engagement import Follow
from app.models.notification import Notification, NotificationType
from app.models.user import User

logger = logging.getLogger(__name__)


async def emit(
    db: AsyncSession,
    *,
    notification_type: NotificationType,
    recipient_id: UUID,
    actor_id: UUID,
    follow_id: UUID | None = None,
) -> Notification | None:
    """Append an unread notification. Skips if actor is the recipient (no self-notify).

    Repeated identical events produce repeated notifications.
    """
    if recipient_id == actor_id:
        return None
    notification = Notification(
        user_id=recipient_id,
        actor_id=actor_id,
        type=notification_type.value,
        follow_id=follow_id,
        is_read=False,
    )
    db.add(notification)
    await db.flush()
    logger.info("Notification %s -> %s (actor %s)", notification_type.value, recipient_id, actor_id)

    from app.workers.notifications import send_push_notification

    send_push_notification.delay(str(recipient_id), notification_type.value, str(actor_id))
    return notification


async def get_notification(db: AsyncSession, notification_id: UUID) -> Notification | None:
    result = await db.execute(select(Notification).where(Notification.id == notification_id))
    return result.scalar_one_or_none()


def clamp_limit(limit: int | None) -> int:
    if limit is None:
        return settings.NOTIFICATIONS_PAGE_SIZE
    return max(1, min(limit, settings.NOTIFICATIONS_MAX_PAGE_SIZE))


async def list_notifications(
    db: AsyncSession,
    recipient_id: UUID,
    *,
    skip: int = 0,
    limit: int | None = None,
) -> list[tuple[Notification, User, Follow | None]]:
    """Notifications for recipient, most recent first, with actor and (if it still exists) follow edge."""
    result = await db.execute(
        select(Notification, User, Follow)
        .join(User, Notification.actor_id == User.id)
        .outerjoin(Follow, Notification.follow_id == Follow.id)
        .where(Notification.user_id == recipient_id)
        .order_by(desc(Notification.created_at))
        .offset(skip)
        .limit(clamp_limit(limit))
    )
    return [tuple(row) for row in result.all()]


async def get_unread_count(db: AsyncSession, recipient_id: UUID) -> int:
    result = await db.execute(
        select(func.count(Notification.id)).where(
            Notification.user_id == recipient_id,
            Notification.is_read == False,
        )
    )
    return result.scalar() or 0


async def mark_one_read(db: AsyncSession, recipient_id: UUID, notification_id: UUID) -> bool:
    """Mark a single notification as read. Returns True if updated."""
    stmt = (
        update(Notification)
        .where(
            Notification.id == notification_id,
            Notification.user_id == recipient_id,
            Notification.is_read == False,
        )
        .values(is_read=True)
    )
    result = await db.execute(stmt)
    return (result.rowcount or 0) > 0


async def mark_all_read(db: AsyncSession, recipient_id: UUID) -> int:
    """Mark all notifications as read. Returns count updated."""
    stmt = (
        update(Notification)
        .where(Notification.user_id == recipient_id, Notification.is_read == False)
        .values(is_read=True)
    )
    result = await db.execute(stmt)
    return result.rowcount or 0


async def retract_follow_request(db: AsyncSession, follow: Follow) -> int:
    """Mark the target's unread FOLLOW_REQUEST notifications for this edge as read."""
    stmt = (
        update(Notification)
        .where(
            Notification.follow_id == follow.id,
            Notification.user_id == follow.following_id,
            Notification.type == NotificationType.FOLLOW_REQUEST.value,
            Notification.is_read == False,
        )
        .values(is_read=True)
    )
    result = await db.execute(stmt)
    return result.rowcount or 0
