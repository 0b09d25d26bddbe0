import asyncio
import sys
import os

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import select
from app.db.session import async_session_maker
from app.models.user import User


async def promote_user(identifier: str) -> int:
    """
    Promote a user to superadmin so they can purge users and remove follows.
    identifier can be email or username.
    """
    async with async_session_maker() as session:
        if "@" in identifier:
            stmt = select(User).where(User.email == identifier.strip().lower())
        else:
            stmt = select(User).where(User.username == identifier)

        result = await session.execute(stmt)
        user = result.scalar_one_or_none()

        if not user:
            print(f"Error: User '{identifier}' not found.")
            return 1

        user.is_superadmin = True
        await session.commit()
        print(f"Success: User '{user.username}' ({user.email}) is now a superadmin.")
        return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/make_superadmin.py <email_or_username>")
        sys.exit(1)

    sys.exit(asyncio.run(promote_user(sys.argv[1])))
