# app/errors.py
import logging

import aiosqlite

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Underlying query or connection failure."""


class UniqueConstraintError(StoreError):
    """A write collided with a UNIQUE column (e.g. employee email)."""


class EmptyUpdateError(ValueError):
    """A partial update was requested with no updatable fields."""


class NotFoundError(LookupError):
    """No row matched where the caller required one."""


def store_error(operation: str, exc: Exception) -> StoreError:
    """Log a driver failure and translate it into a StoreError."""
    logger.error("%s failed: %s", operation, exc)
    if isinstance(exc, aiosqlite.IntegrityError) and "UNIQUE constraint failed" in str(exc):
        return UniqueConstraintError(str(exc))
    return StoreError(str(exc))
