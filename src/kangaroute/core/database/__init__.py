"""Database layer - session management, base models, and mixins."""

from kangaroute.core.database.base import (
    Base,
    IntegerIDMixin,
    SoftDeleteMixin,
    TimestampMixin,
    utcnow,
)
from kangaroute.core.database.integrity import is_unique_violation
from kangaroute.core.database.session import (
    async_engine,
    async_session_factory,
    get_db,
)


__all__ = [
    "Base",
    "IntegerIDMixin",
    "SoftDeleteMixin",
    "TimestampMixin",
    "async_engine",
    "async_session_factory",
    "get_db",
    "is_unique_violation",
    "utcnow",
]
