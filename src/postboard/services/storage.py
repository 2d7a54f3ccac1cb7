"""Store-failure translation shared by the services.

Learn: Services wrap each unit of database work in storage_errors().
A SQLAlchemyError inside the block rolls the session back, is logged
with its real cause, and re-raised as StorageError carrying only a safe
per-operation message. Errors are never retried: one attempt, fail fast.
PostboardError subclasses raised inside the block pass straight through.
"""

from contextlib import asynccontextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.errors import StorageError

logger = structlog.get_logger()


@asynccontextmanager
async def storage_errors(db: AsyncSession, message: str):
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("storage.error", operation=message, error=str(e))
        raise StorageError(message) from e
