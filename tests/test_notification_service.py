from datetime import datetime, timedelta
from unittest.mock import patch

from app.models.notification import NotificationType
from app.services import notification_service
from app.workers.notifications import send_push_notification


class TestEmit:

    async def test_emit_appends_unread_and_queues_push(self, db, make_user):
        a = await make_user("alice")
        b = await make_user("bob")

        with patch.object(send_push_notification, "delay") as delay:
            notification = await notification_service.emit(
                db,
                notification_type=NotificationType.FOLLOWED_YOU,
                recipient_id=a.id,
                actor_id=b.id,
            )

        assert notification.is_read is False
        assert notification.follow_id is None
        delay.assert_called_once_with(str(a.id), "FOLLOWED_YOU", str(b.id))

    async def test_no_self_notification(self, db, make_user):
        a = await make_user("alice")
        result = await notification_service.emit(
            db,
            notification_type=NotificationType.FOLLOWED_YOU,
            recipient_id=a.id,
            actor_id=a.id,
        )
        assert result is None
        assert await notification_service.get_unread_count(db, a.id) == 0

    async def test_repeated_events_are_not_deduplicated(self, db, make_user):
        a = await make_user("alice")
        b = await make_user("bob")
        for _ in range(3):
            await notification_service.emit(
                db,
                notification_type=NotificationType.FOLLOWED_YOU,
                recipient_id=a.id,
                actor_id=b.id,
            )
        assert await notification_service.get_unread_count(db, a.id) == 3


class TestListing:

    async def _seed(self, db, recipient, actor, count):
        base = datetime(2025, 1, 1, 12, 0, 0)
        created = []
        for i in range(count):
            n = await notification_service.emit(
                db,
                notification_type=NotificationType.FOLLOWED_YOU,
                recipient_id=recipient.id,
                actor_id=actor.id,
            )
            n.created_at = base + timedelta(minutes=i)
            created.append(n)
        await db.flush()
        return created

    async def test_newest_first_with_actor(self, db, make_user):
        a = await make_user("alice")
        b = await make_user("bob")
        created = await self._seed(db, a, b, 3)

        rows = await notification_service.list_notifications(db, a.id)

        assert [n.id for n, _, _ in rows] == [n.id for n in reversed(created)]
        for _, actor, follow in rows:
            assert actor.id == b.id
            assert follow is None

    async def test_only_recipient_sees_notifications(self, db, make_user):
        a = await make_user("alice")
        b = await make_user("bob")
        await self._seed(db, a, b, 2)

        assert await notification_service.list_notifications(db, b.id) == []

    async def test_pagination_is_bounded(self, db, make_user):
        a = await make_user("alice")
        b = await make_user("bob")
        created = await self._seed(db, a, b, 5)

        page = await notification_service.list_notifications(db, a.id, skip=1, limit=2)
        assert [n.id for n, _, _ in page] == [created[3].id, created[2].id]

        assert notification_service.clamp_limit(None) == 50
        assert notification_service.clamp_limit(10_000) == 100
        assert notification_service.clamp_limit(0) == 1


class TestReadState:

    async def test_mark_one_read_only_for_recipient(self, db, make_user):
        a = await make_user("alice")
        b = await make_user("bob")
        n = await notification_service.emit(
            db,
            notification_type=NotificationType.FOLLOWED_YOU,
            recipient_id=a.id,
            actor_id=b.id,
        )

        assert await notification_service.mark_one_read(db, b.id, n.id) is False
        assert await notification_service.mark_one_read(db, a.id, n.id) is True
        assert await notification_service.mark_one_read(db, a.id, n.id) is False
        assert await notification_service.get_unread_count(db, a.id) == 0

    async def test_mark_all_read(self, db, make_user):
        a = await make_user("alice")
        b = await make_user("bob")
        for _ in range(3):
            await notification_service.emit(
                db,
                notification_type=NotificationType.FOLLOWED_YOU,
                recipient_id=a.id,
                actor_id=b.id,
            )

        assert await notification_service.mark_all_read(db, a.id) == 3
        assert await notification_service.mark_all_read(db, a.id) == 0
        assert await notification_service.get_unread_count(db, a.id) == 0
