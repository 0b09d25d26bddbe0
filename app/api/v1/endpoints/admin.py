"""Administrative moderation."""
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_current_superadmin
from app.core.errors import NotFound
from app.models.user import User
from app.schemas.base import OkResponse
from app.services import account_service, follow_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.delete("/users/{user_id}", response_model=OkResponse)
async def purge_user(
    user_id: UUID,
    admin: User = Depends(get_current_superadmin),
    db: AsyncSession = Depends(get_db),
):
    """Delete a user with everything they own or participate in."""
    await account_service.purge_user(db, user_id)
    return OkResponse()


@router.delete("/follows/{follow_id}", response_model=OkResponse)
async def remove_follow(
    follow_id: UUID,
    admin: User = Depends(get_current_superadmin),
    db: AsyncSession = Depends(get_db),
):
    if not await follow_service.remove_follow(db, follow_id):
        raise NotFound("Follow not found")
    return OkResponse()
