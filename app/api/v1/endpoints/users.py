"""User profile, privacy and follow endpoints."""
from uuid import UUID

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_current_user_optional, get_current_user
from app.models.user import User
from app.schemas.follow import FollowAction, FollowActionRequest, FollowStateResponse
from app.schemas.post import PostListItem
from app.schemas.user import DeleteAccountRequest, PrivacySettings, UserResponse, UserSummary
from app.services import account_service, follow_service, post_service
from app.services.auth_service import user_to_response, user_to_summary
from app.services.follow_service import FollowState

router = APIRouter(prefix="/users", tags=["users"])


def _state_to_response(state: FollowState) -> FollowStateResponse:
    return FollowStateResponse(
        followers=state.follower_count,
        following=state.following_count,
        is_following=state.is_following,
        requested=state.requested,
    )


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    return user_to_response(current_user, include_email=True)


@router.delete("/me", response_model=dict)
async def delete_me(
    data: DeleteAccountRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Delete your account and everything it owns. Requires the current password."""
    await account_service.delete_own_account(db, current_user, data.password)
    return {"message": "Account deleted."}


@router.get("/me/privacy", response_model=PrivacySettings)
async def get_privacy(current_user: User = Depends(get_current_user)):
    return PrivacySettings(is_private=current_user.is_private)


@router.post("/me/privacy", response_model=PrivacySettings)
async def update_privacy(
    data: PrivacySettings,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    user = await account_service.set_privacy(db, current_user, data.is_private)
    return PrivacySettings(is_private=user.is_private)


@router.get("/me/follow-requests", response_model=list[UserSummary])
async def get_follow_requests(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """People waiting for you to accept their follow request."""
    users = await follow_service.list_pending_requests(db, current_user.id)
    return [user_to_summary(u) for u in users]


@router.get("/{user_id}/follow-state", response_model=FollowStateResponse)
async def get_follow_state(
    user_id: UUID,
    current_user: User | None = Depends(get_current_user_optional),
    db: AsyncSession = Depends(get_db),
):
    viewer_id = current_user.id if current_user else None
    state = await follow_service.get_follow_state(db, viewer_id, user_id)
    return _state_to_response(state)


@router.post("/{user_id}/follow", response_model=FollowStateResponse)
async def follow_user(
    user_id: UUID,
    data: FollowActionRequest | None = Body(None),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Follow, unfollow or (with no action) toggle. Private targets get a pending request."""
    action = data.action if data else None
    state = await follow_service.set_follow_state(db, current_user.id, user_id, action)
    return _state_to_response(state)


@router.delete("/{user_id}/follow", response_model=FollowStateResponse)
async def unfollow_user(
    user_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Unfollow, or withdraw a pending request."""
    state = await follow_service.set_follow_state(db, current_user.id, user_id, FollowAction.UNFOLLOW)
    return _state_to_response(state)


@router.get("/{user_id}/followers", response_model=list[UserSummary])
async def get_user_followers(
    user_id: UUID,
    current_user: User | None = Depends(get_current_user_optional),
    db: AsyncSession = Depends(get_db),
):
    viewer_id = current_user.id if current_user else None
    is_admin = bool(current_user and current_user.is_superadmin)
    users = await follow_service.list_followers(db, user_id, viewer_id, is_admin=is_admin)
    return [user_to_summary(u) for u in users]


@router.get("/{user_id}/following", response_model=list[UserSummary])
async def get_user_following(
    user_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    users = await follow_service.list_following(db, user_id)
    return [user_to_summary(u) for u in users]


@router.get("/{user_id}/posts", response_model=list[PostListItem])
async def get_user_posts(
    user_id: UUID,
    current_user: User | None = Depends(get_current_user_optional),
    db: AsyncSession = Depends(get_db),
):
    viewer_id = current_user.id if current_user else None
    is_admin = bool(current_user and current_user.is_superadmin)
    posts = await post_service.list_user_posts(db, user_id, viewer_id, is_admin=is_admin)
    return [
        PostListItem(id=p.id, title=p.title, image_url=p.image_url, created_at=p.created_at)
        for p in posts
    ]
