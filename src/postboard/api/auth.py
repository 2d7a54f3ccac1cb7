"""Auth API — signup and login.

Learn: Routes for account lifecycle:
- POST /signup → create a user (201 with id, name, email)
- POST /login  → email/password → {"token": <JWT, valid 1 hour>}

Failures: bad input 400, duplicate email 400, unknown email 404,
wrong password 401.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.auth.dependencies import get_settings
from postboard.auth.jwt import create_access_token
from postboard.config import Settings
from postboard.db.engine import get_db
from postboard.schemas.user import LoginRequest, SignupRequest, TokenResponse, UserRead
from postboard.services.user_service import UserService

router = APIRouter()


def _svc(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(db, bcrypt_rounds=settings.bcrypt_rounds)


@router.post("/signup", response_model=UserRead, status_code=201)
async def signup(body: SignupRequest, svc: UserService = Depends(_svc)):
    """Create a new user account."""
    return await svc.register(name=body.name, email=body.email, password=body.password)


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    svc: UserService = Depends(_svc),
    settings: Settings = Depends(get_settings),
):
    """Login with email and password → bearer token."""
    user = await svc.authenticate(body.email, body.password)
    return TokenResponse(token=create_access_token(user.id, settings))
