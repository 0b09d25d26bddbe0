from app.models.user import User
from app.models.post import Post
from app.models.engagement import Follow, FollowStatus
from app.models.notification import Notification, NotificationType

__all__ = ["User", "Post", "Follow", "FollowStatus", "Notification", "NotificationType"]
