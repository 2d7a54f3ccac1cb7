"""Pydantic schemas for posts, comments, and likes.

Learn: Separate request schemas (input) from Read schemas (output).
Read schemas use a camelCase alias generator, so the wire format is
userId / postId / createdAt while the Python side stays snake_case.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}
_CAMEL_READ = {**_CAMEL, "from_attributes": True}


# ─── Posts ──────────────────────────────────────────────

class PostWrite(BaseModel):
    """Body for creating or updating a post."""
    title: str = ""
    content: str = ""
    tags: Optional[str] = None

    model_config = {"validate_default": True}

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator("content")
    @classmethod
    def content_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Content is required")
        return v


class PostRead(BaseModel):
    id: int
    title: str
    content: str
    tags: Optional[str] = None
    user_id: int
    created_at: Optional[datetime] = None

    model_config = _CAMEL_READ


class MessageResponse(BaseModel):
    message: str


# ─── Comments ───────────────────────────────────────────

class CommentCreate(BaseModel):
    """Both fields are checked together by the route (one error message)."""
    post_id: Optional[int] = None
    content: Optional[str] = None

    model_config = _CAMEL


class CommentRead(BaseModel):
    id: int
    post_id: int
    user_id: int
    content: str
    created_at: Optional[datetime] = None

    model_config = _CAMEL_READ


# ─── Likes ──────────────────────────────────────────────

class LikeCreate(BaseModel):
    post_id: Optional[int] = None

    model_config = _CAMEL


class LikeRead(BaseModel):
    id: int
    post_id: int
    user_id: int

    model_config = _CAMEL_READ
