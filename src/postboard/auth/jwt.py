"""JWT token creation and verification.

Learn: JWT (JSON Web Token) provides stateless authentication.
An access token is signed with the server secret (HS256), carries the
user id in "sub" and expires an hour after issue. Nothing is stored
server-side, so a token can't be revoked before it expires.

verify_token() tells the four failure kinds apart (missing, malformed,
expired, bad signature) so they can be logged precisely; the HTTP layer
collapses them to a single "Invalid token." response.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from postboard.config import Settings


class TokenError(Exception):
    """Raised when token verification fails."""

    reason = "invalid"


class TokenMissingError(TokenError):
    reason = "missing"


class MalformedTokenError(TokenError):
    reason = "malformed"


class ExpiredTokenError(TokenError):
    reason = "expired"


class TokenSignatureError(TokenError):
    reason = "signature_invalid"


def create_access_token(
    user_id: int,
    settings: Settings,
    issued_at: Optional[datetime] = None,
) -> str:
    """Create a JWT access token for user_id.

    issued_at defaults to now; passing an earlier instant is how tests
    produce tokens that have already expired.
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: Optional[str], settings: Settings) -> int:
    """Verify a JWT access token and return its subject (user id).

    Raises a TokenError subclass on failure.
    """
    if not token:
        raise TokenMissingError("No token provided")
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError("Token has expired")
    except jwt.InvalidSignatureError:
        raise TokenSignatureError("Token signature does not match")
    except jwt.InvalidTokenError as e:
        raise MalformedTokenError(f"Malformed token: {e}")

    try:
        return int(payload["sub"])
    except (TypeError, ValueError):
        raise MalformedTokenError("Token subject is not a user id")
