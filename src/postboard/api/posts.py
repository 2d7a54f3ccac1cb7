"""Post API routes.

Learn: Routes handle HTTP concerns (status codes, parameter parsing),
PostService handles the rules. Listing parameters are taken as raw
strings and parsed/clamped by PostQuery.from_params, so a page of "abc"
or "-3" never reaches the query.

Path ids are raw strings too. One that can't name a row ("abc", 0, or
past the 64-bit range) gets the same 404 as an id with no row behind it.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.auth.dependencies import get_current_user_id, get_settings
from postboard.config import Settings
from postboard.db.engine import get_db
from postboard.errors import PostNotFoundError, PostNotFoundOrUnauthorizedError
from postboard.schemas.post import MessageResponse, PostRead, PostWrite
from postboard.services.post_query import PostQuery, parse_row_id
from postboard.services.post_service import PostService

router = APIRouter()


def _svc(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(db)


@router.post("/posts", response_model=PostRead, status_code=201)
async def create_post(
    body: PostWrite,
    user_id: int = Depends(get_current_user_id),
    svc: PostService = Depends(_svc),
):
    return await svc.create_post(
        author_id=user_id, title=body.title, content=body.content, tags=body.tags
    )


@router.get("/posts", response_model=list[PostRead])
async def list_posts(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    tag: Optional[str] = Query(None),
    svc: PostService = Depends(_svc),
    settings: Settings = Depends(get_settings),
):
    """Paginated listing, optionally filtered by title and tag substrings."""
    query = PostQuery.from_params(
        page, limit, search, tag, default_limit=settings.default_page_size
    )
    return await svc.list_posts(query)


@router.get("/posts/{post_id}", response_model=PostRead)
async def get_post(post_id: str, svc: PostService = Depends(_svc)):
    row_id = parse_row_id(post_id)
    if row_id is None:
        raise PostNotFoundError()
    return await svc.get_post(row_id)


@router.put("/posts/{post_id}", response_model=MessageResponse)
async def update_post(
    post_id: str,
    body: PostWrite,
    user_id: int = Depends(get_current_user_id),
    svc: PostService = Depends(_svc),
):
    """Owner-only update. Someone else's post looks like a missing one (404)."""
    row_id = parse_row_id(post_id)
    if row_id is None:
        raise PostNotFoundOrUnauthorizedError()
    await svc.update_post(
        row_id, user_id, title=body.title, content=body.content, tags=body.tags
    )
    return MessageResponse(message="Post updated successfully")


@router.delete("/posts/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    user_id: int = Depends(get_current_user_id),
    svc: PostService = Depends(_svc),
):
    row_id = parse_row_id(post_id)
    if row_id is None:
        raise PostNotFoundOrUnauthorizedError()
    await svc.delete_post(row_id, user_id)
    return MessageResponse(message="Post deleted successfully")
