"""Request field checks shared by the entity services."""

from collections.abc import Mapping
from typing import Any

from kangaroute.core.errors import ValidationError


def is_blank(value: Any) -> bool:
    """Return True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(values: Mapping[str, Any]) -> list[str]:
    """Return the names of blank entries, in mapping order.

    Examples:
        >>> missing_fields({"name": "Van", "license_plate": " "})
        ['license_plate']
    """
    return [name for name, value in values.items() if is_blank(value)]


def require_fields(values: Mapping[str, Any], message: str) -> None:
    """Raise ValidationError if any of ``values`` is blank.

    Args:
        values: Field name to submitted value
        message: User-facing message for the error

    Raises:
        ValidationError: Listing every blank field
    """
    missing = missing_fields(values)
    if missing:
        raise ValidationError(message, missing_fields=missing)


def require_positive(name: str, value: float | None, label: str) -> None:
    """Raise ValidationError if a supplied dimension is not greater than zero.

    ``None`` means "not supplied" and passes.
    """
    if value is not None and value <= 0:
        raise ValidationError(
            f"{label} must be greater than 0",
            errors=[{"field": name, "message": "must be greater than 0"}],
        )
