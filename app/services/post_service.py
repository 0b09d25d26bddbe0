"""Posts: creation and visibility-gated reads."""
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.errors import NotFound
from app.models.post import Post
from app.models.user import User
from app.schemas.post import PostCreate
from app.services.visibility import ensure_can_view


async def create_post(db: AsyncSession, author_id: UUID, data: PostCreate) -> Post:
    post = Post(
        author_id=author_id,
        title=data.title,
        content=data.content,
        image_url=data.image_url,
    )
    db.add(post)
    await db.flush()
    await db.refresh(post)
    return post


async def list_user_posts(
    db: AsyncSession,
    owner_id: UUID,
    viewer_id: UUID | None,
    *,
    is_admin: bool = False,
) -> list[Post]:
    """Owner's posts, newest first. Raises PrivateAccount if the viewer may not see them."""
    result = await db.execute(select(User).where(User.id == owner_id))
    owner = result.scalar_one_or_none()
    if not owner:
        return []
    await ensure_can_view(db, viewer_id, owner, is_admin=is_admin)
    result = await db.execute(
        select(Post).where(Post.author_id == owner_id).order_by(desc(Post.created_at))
    )
    return list(result.scalars().all())


async def get_post_preview(
    db: AsyncSession,
    post_id: UUID,
    viewer_id: UUID | None,
    *,
    is_admin: bool = False,
) -> Post:
    """Share-card lookup for a single post, gated like the author's profile."""
    result = await db.execute(
        select(Post).where(Post.id == post_id).options(selectinload(Post.author))
    )
    post = result.scalar_one_or_none()
    if not post:
        raise NotFound("Post not found")
    await ensure_can_view(db, viewer_id, post.author, is_admin=is_admin)
    return post
