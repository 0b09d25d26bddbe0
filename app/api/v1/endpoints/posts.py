"""Posts: create and share-card preview."""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_current_user, get_current_user_optional
from app.models.post import Post
from app.models.user import User
from app.schemas.post import PostCreate, PostPreviewResponse, PostResponse
from app.services import post_service
from app.services.auth_service import user_to_summary

router = APIRouter(prefix="/posts", tags=["posts"])


def post_to_response(post: Post, author: User) -> PostResponse:
    return PostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        image_url=post.image_url,
        created_at=post.created_at,
        author=user_to_summary(author),
    )


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post_endpoint(
    data: PostCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    post = await post_service.create_post(db, current_user.id, data)
    return post_to_response(post, current_user)


@router.get("/{post_id}/preview", response_model=PostPreviewResponse)
async def get_post_preview(
    post_id: UUID,
    current_user: User | None = Depends(get_current_user_optional),
    db: AsyncSession = Depends(get_db),
):
    viewer_id = current_user.id if current_user else None
    is_admin = bool(current_user and current_user.is_superadmin)
    post = await post_service.get_post_preview(db, post_id, viewer_id, is_admin=is_admin)
    return PostPreviewResponse(post=post_to_response(post, post.author))
