"""Error hierarchy for every failure the API reports.

Learn: Each error carries the HTTP status it maps to and a human-readable
message that is safe to show the caller. The global handlers in
api/error_handlers.py render them all as {"error": message}, so route
code just raises and never builds error responses by hand.

Two collapses are deliberate:
- Any bad token (malformed, expired, wrong signature) is reported as one
  400 "Invalid token."; only a missing token gets its own 401.
- Updating or deleting a post you don't own looks exactly like updating
  or deleting a post that doesn't exist, so other users' post ids can't
  be probed.
"""


class PostboardError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(PostboardError):
    """Malformed or missing input, rejected before any store access."""

    status_code = 400
    message = "Invalid request"


# ─── Authentication ─────────────────────────────────────


class AuthenticationError(PostboardError):
    status_code = 401
    message = "Authentication required"


class MissingTokenError(AuthenticationError):
    status_code = 401
    message = "Access denied. No token provided."


class InvalidTokenError(AuthenticationError):
    status_code = 400
    message = "Invalid token."


class InvalidCredentialsError(AuthenticationError):
    status_code = 401
    message = "Invalid credentials"


# ─── Lookup / ownership ─────────────────────────────────


class NotFoundError(PostboardError):
    status_code = 404
    message = "Not found"


class UserNotFoundError(NotFoundError):
    message = "User not found"


class PostNotFoundError(NotFoundError):
    message = "Post not found"


class PostNotFoundOrUnauthorizedError(NotFoundError):
    """The ownership predicate matched no row.

    Covers both "no such post" and "not your post"; callers must not
    be able to tell them apart.
    """

    message = "Post not found or unauthorized"


# ─── Conflicts / storage ────────────────────────────────


class ConflictError(PostboardError):
    status_code = 400
    message = "Email already exists"


class StorageError(PostboardError):
    """Underlying persistence failure. The cause is logged, never returned."""

    status_code = 500
    message = "Internal server error"
