"""Like API routes.

Learn: No de-duplication. Each POST /likes adds another row, even for
the same user and post.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.auth.dependencies import get_current_user_id
from postboard.db.engine import get_db
from postboard.errors import PostNotFoundError, ValidationError
from postboard.schemas.post import LikeCreate, LikeRead
from postboard.services.post_query import parse_row_id
from postboard.services.post_service import PostService

router = APIRouter()


def _svc(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)


@router.post("/likes", response_model=LikeRead, status_code=201)
async def create_like(
    body: LikeCreate,
    user_id: int = Depends(get_current_user_id),
    svc: PostService = Depends(_svc),
):
    if not body.post_id:
        raise ValidationError("Post ID is required")
    post_id = parse_row_id(body.post_id)
    if post_id is None:
        raise PostNotFoundError()
    return await svc.create_like(author_id=user_id, post_id=post_id)


@router.get("/posts/{post_id}/likes", response_model=list[LikeRead])
async def list_likes(post_id: str, svc: PostService = Depends(_svc)):
    row_id = parse_row_id(post_id)
    if row_id is None:
        return []
    return await svc.list_likes(row_id)
