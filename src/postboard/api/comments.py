"""Comment API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.auth.dependencies import get_current_user_id
from postboard.db.engine import get_db
from postboard.errors import PostNotFoundError, ValidationError
from postboard.schemas.post import CommentCreate, CommentRead
from postboard.services.post_query import parse_row_id
from postboard.services.post_service import PostService

router = APIRouter()


def _svc(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)


@router.post("/comments", response_model=CommentRead, status_code=201)
async def create_comment(
    body: CommentCreate,
    user_id: int = Depends(get_current_user_id),
    svc: PostService = Depends(_svc),
):
    if not body.post_id or not body.content:
        raise ValidationError("Post ID and content are required")
    post_id = parse_row_id(body.post_id)
    if post_id is None:
        raise PostNotFoundError()
    return await svc.create_comment(
        author_id=user_id, post_id=post_id, content=body.content
    )


@router.get("/posts/{post_id}/comments", response_model=list[CommentRead])
async def list_comments(post_id: str, svc: PostService = Depends(_svc)):
    row_id = parse_row_id(post_id)
    if row_id is None:
        return []
    return await svc.list_comments(row_id)
