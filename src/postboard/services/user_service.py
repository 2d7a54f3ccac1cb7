"""User service — credential store and login.

Learn: Email uniqueness is enforced by the users.email UNIQUE constraint,
not by a select-then-insert check, so two concurrent signups for the same
address can't both succeed. The IntegrityError from the losing insert is
turned into ConflictError.

Hashing and verification run in a worker thread (asyncio.to_thread):
bcrypt takes tens of milliseconds and other requests keep flowing
meanwhile.
"""

import asyncio

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.auth.password import hash_password, verify_password
from postboard.db.models import User
from postboard.errors import ConflictError, InvalidCredentialsError, UserNotFoundError
from postboard.services.storage import storage_errors

logger = structlog.get_logger()


class UserService:
    """Business logic for accounts."""

    def __init__(self, db: AsyncSession, bcrypt_rounds: int = 10):
        self.db = db
        self.bcrypt_rounds = bcrypt_rounds

    async def register(self, name: str, email: str, password: str) -> User:
        """Create an account. Raises ConflictError if the email is taken."""
        password_hash = await asyncio.to_thread(
            hash_password, password, self.bcrypt_rounds
        )
        user = User(name=name, email=email, password_hash=password_hash)

        async with storage_errors(self.db, "Failed to register user"):
            self.db.add(user)
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                logger.info("auth.duplicate_email")
                raise ConflictError()
            await self.db.refresh(user)

        logger.info("auth.registered", user_id=user.id)
        return user

    async def find_by_email(self, email: str) -> User | None:
        async with storage_errors(self.db, "Failed to look up user"):
            result = await self.db.execute(select(User).where(User.email == email))
            return result.scalars().first()

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials and return the matching user.

        Unknown email → UserNotFoundError; wrong password → InvalidCredentialsError.
        """
        user = await self.find_by_email(email)
        if not user:
            logger.info("auth.login_failed", reason="unknown_email")
            raise UserNotFoundError()

        matches = await asyncio.to_thread(verify_password, password, user.password_hash)
        if not matches:
            logger.info("auth.login_failed", reason="bad_password", user_id=user.id)
            raise InvalidCredentialsError()

        logger.info("auth.login", user_id=user.id)
        return user
