import asyncio
import sys
import os

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select
from app.db.session import async_session_maker
from app.models.user import User
from app.services.follow_service import count_followers, count_following


async def list_users():
    async with async_session_maker() as session:
        result = await session.execute(select(User).order_by(User.username))
        users = result.scalars().all()
        if not users:
            print("No users found in database.")
            return
        print("Current Users:")
        for user in users:
            followers = await count_followers(session, user.id)
            following = await count_following(session, user.id)
            print(
                f"- {user.username} ({user.email}) | Private: {user.is_private} | "
                f"Admin: {user.is_superadmin} | {followers} followers / {following} following"
            )


if __name__ == "__main__":
    asyncio.run(list_users())
