"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Reads are public and writes are protected, often on the same
path (GET vs POST /posts), so auth is applied per route with
Depends(get_current_user_id) rather than at the include_router level.
"""

from fastapi import APIRouter

from postboard.api.auth import router as auth_router
from postboard.api.comments import router as comments_router
from postboard.api.health import router as health_router
from postboard.api.likes import router as likes_router
from postboard.api.posts import router as posts_router

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(posts_router, tags=["posts"])
api_router.include_router(comments_router, tags=["comments"])
api_router.include_router(likes_router, tags=["likes"])
