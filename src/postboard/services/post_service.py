"""Post service — posts, comments, and likes.

Learn: Service layer separates business logic from HTTP routing.
API routes call services, services call the database.

Rules enforced here:
- The acting user id always comes from the verified token (the route
  passes it in); it is never read from a request body.
- Update and delete use a single ownership-scoped statement
  (WHERE id = :id AND user_id = :requester). Zero affected rows means
  "not found or not yours" and the two cases are never distinguished.
- Comments and likes must reference an existing post and an existing
  user at write time. Deleting a post does not cascade to them.
- A user may like the same post any number of times.
"""

from typing import Optional

import structlog
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.db.models import Comment, Like, Post, User
from postboard.errors import (
    PostNotFoundError,
    PostNotFoundOrUnauthorizedError,
    UserNotFoundError,
)
from postboard.services.post_query import PostQuery, build_post_select
from postboard.services.storage import storage_errors

logger = structlog.get_logger()


class PostService:
    """Business logic for posts and their comments and likes."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # ─── Posts ──────────────────────────────────────────

    async def create_post(
        self,
        author_id: int,
        title: str,
        content: str,
        tags: Optional[str] = None,
    ) -> Post:
        async with storage_errors(self.db, "Failed to create post"):
            await self._require_user(author_id)
            post = Post(title=title, content=content, tags=tags, user_id=author_id)
            self.db.add(post)
            await self.db.commit()
            await self.db.refresh(post)

        logger.info("posts.created", post_id=post.id, user_id=author_id)
        return post

    async def list_posts(self, query: PostQuery) -> list[Post]:
        async with storage_errors(self.db, "Failed to fetch posts"):
            result = await self.db.execute(build_post_select(query))
            return list(result.scalars().all())

    async def get_post(self, post_id: int) -> Post:
        async with storage_errors(self.db, "Failed to fetch post"):
            post = await self.db.get(Post, post_id)
        if not post:
            raise PostNotFoundError()
        return post

    async def update_post(
        self,
        post_id: int,
        requester_id: int,
        title: str,
        content: str,
        tags: Optional[str] = None,
    ) -> None:
        """Overwrite title/content/tags of a post the requester owns."""
        async with storage_errors(self.db, "Failed to update post"):
            result = await self.db.execute(
                update(Post)
                .where(Post.id == post_id, Post.user_id == requester_id)
                .values(title=title, content=content, tags=tags)
            )
            await self.db.commit()

        if result.rowcount == 0:
            raise PostNotFoundOrUnauthorizedError()
        logger.info("posts.updated", post_id=post_id, user_id=requester_id)

    async def delete_post(self, post_id: int, requester_id: int) -> None:
        """Hard-delete a post the requester owns. Comments and likes stay."""
        async with storage_errors(self.db, "Failed to delete post"):
            result = await self.db.execute(
                delete(Post).where(Post.id == post_id, Post.user_id == requester_id)
            )
            await self.db.commit()

        if result.rowcount == 0:
            raise PostNotFoundOrUnauthorizedError()
        logger.info("posts.deleted", post_id=post_id, user_id=requester_id)

    # ─── Comments ───────────────────────────────────────

    async def create_comment(self, author_id: int, post_id: int, content: str) -> Comment:
        async with storage_errors(self.db, "Failed to add comment"):
            await self._require_user(author_id)
            await self._require_post(post_id)
            comment = Comment(post_id=post_id, user_id=author_id, content=content)
            self.db.add(comment)
            await self.db.commit()
            await self.db.refresh(comment)

        logger.info("comments.created", comment_id=comment.id, post_id=post_id)
        return comment

    async def list_comments(self, post_id: int) -> list[Comment]:
        async with storage_errors(self.db, "Failed to fetch comments"):
            result = await self.db.execute(
                select(Comment).where(Comment.post_id == post_id).order_by(Comment.id)
            )
            return list(result.scalars().all())

    # ─── Likes ──────────────────────────────────────────

    async def create_like(self, author_id: int, post_id: int) -> Like:
        async with storage_errors(self.db, "Failed to like post"):
            await self._require_user(author_id)
            await self._require_post(post_id)
            like = Like(post_id=post_id, user_id=author_id)
            self.db.add(like)
            await self.db.commit()
            await self.db.refresh(like)

        logger.info("likes.created", like_id=like.id, post_id=post_id)
        return like

    async def list_likes(self, post_id: int) -> list[Like]:
        async with storage_errors(self.db, "Failed to fetch likes"):
            result = await self.db.execute(
                select(Like).where(Like.post_id == post_id).order_by(Like.id)
            )
            return list(result.scalars().all())

    # ─── Helpers ────────────────────────────────────────

    async def _require_user(self, user_id: int) -> None:
        if await self.db.get(User, user_id) is None:
            raise UserNotFoundError()

    async def _require_post(self, post_id: int) -> None:
        if await self.db.get(Post, post_id) is None:
            raise PostNotFoundError()
