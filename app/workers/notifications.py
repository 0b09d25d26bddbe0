"""Celery tasks for push notifications."""
import logging

from app.core.celery_app import celery_app

logger = logging.getLogger(__name__)


@celery_app.task
def send_push_notification(user_id: str, notification_type: str, actor_id: str) -> None:
    # Placeholder: FCM/APNs
    logger.debug("push %s -> %s (actor %s)", notification_type, user_id, actor_id)
