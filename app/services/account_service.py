"""Account settings and purges."""
import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import Forbidden, NotFound, Unauthorized
from app.core.security import verify_password
from app.models.user import User

logger = logging.getLogger(__name__)


async def set_privacy(db: AsyncSession, user: User, is_private: bool) -> User:
    """Flip the privacy flag. Existing edges keep their status."""
    user.is_private = is_private
    await db.flush()
    logger.info("User %s is_private=%s", user.id, is_private)
    return user


async def purge_user(db: AsyncSession, user_id: UUID) -> None:
    """Hard-delete a user with their posts, follow edges and notifications."""
    user = await db.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    if user.is_superadmin:
        raise Forbidden("Cannot delete an administrator")
    await db.delete(user)
    await db.flush()
    logger.warning("User %s (%s) purged", user_id, user.username)


async def delete_own_account(db: AsyncSession, user: User, password: str) -> None:
    if not verify_password(password, user.password_hash):
        raise Unauthorized("Incorrect password.")
    await db.delete(user)
    await db.flush()
    logger.warning("User %s deleted their account", user.id)
