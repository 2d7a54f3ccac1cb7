"""FastAPI auth dependencies.

Learn: These are used as Depends() in route handlers to extract
and validate the current user identity from the request.

Per-request state machine:
    no header / empty bearer  → 401 "Access denied. No token provided."
    token present but invalid → 400 "Invalid token."
    token valid               → handler receives the user id
"""

from typing import Optional

import structlog
from fastapi import Depends, Header, Request

from postboard.auth.jwt import TokenError, TokenMissingError, verify_token
from postboard.config import Settings
from postboard.errors import InvalidTokenError, MissingTokenError

logger = structlog.get_logger()

BEARER_PREFIX = "Bearer "


def get_settings(request: Request) -> Settings:
    """The Settings the running app was built with."""
    return request.app.state.settings


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Pull the token out of an Authorization header value.

    A value without the "Bearer " prefix is treated as the raw token.
    """
    if authorization is None:
        return None
    if authorization.startswith(BEARER_PREFIX):
        authorization = authorization[len(BEARER_PREFIX):]
    return authorization.strip() or None


async def get_current_user_id(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> int:
    """Authenticated user id. Rejects the request if there is none."""
    token = extract_bearer_token(authorization)
    try:
        user_id = verify_token(token, settings)
    except TokenMissingError:
        raise MissingTokenError()
    except TokenError as e:
        logger.info("auth.token_rejected", reason=e.reason)
        raise InvalidTokenError() from e

    structlog.contextvars.bind_contextvars(user_id=user_id)
    return user_id
