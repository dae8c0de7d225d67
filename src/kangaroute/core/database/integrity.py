"""Classification of integrity errors raised on flush."""

from sqlalchemy.exc import IntegrityError


# SQLSTATE for unique_violation, exposed by the PostgreSQL drivers
UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if the error comes from a unique constraint or index.

    NOT NULL, foreign key and check failures return False.

    Examples:
        PostgreSQL: 'duplicate key value violates unique constraint "uq_slots_vehicle_name"'
        SQLite:     'UNIQUE constraint failed: slots.vehicle_id, slots.name'
    """
    if getattr(exc.orig, "sqlstate", None) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    return "unique constraint" in str(exc.orig).lower()
