"""Slot database models."""

from sqlalchemy import Boolean, ForeignKey, Numeric, String, UniqueConstraint, true
from sqlalchemy.orm import Mapped, mapped_column

from kangaroute.core.constants import (
    DIMENSION_PRECISION,
    DIMENSION_SCALE,
    MAX_SLOT_NAME_LENGTH,
)
from kangaroute.core.database.base import Base, IntegerIDMixin, TimestampMixin


def _dimension() -> Mapped[float]:
    return mapped_column(
        Numeric(DIMENSION_PRECISION, DIMENSION_SCALE, asdecimal=False),
        nullable=False,
    )


class Slot(Base, IntegerIDMixin, TimestampMixin):
    """A cargo place inside a vehicle where one pet carrier fits.

    Slots are hard-deleted; ``is_active`` is an availability flag set by
    the company, not a soft-delete marker.

    Attributes:
        name: Label, unique within the vehicle
        height: Height in centimetres
        width: Width in centimetres
        depth: Depth in centimetres
        is_active: Whether the slot is available
        vehicle_id: Owning vehicle, never changes after creation
    """

    __tablename__ = "slots"

    name: Mapped[str] = mapped_column(
        String(MAX_SLOT_NAME_LENGTH),
        nullable=False,
    )
    height: Mapped[float] = _dimension()
    width: Mapped[float] = _dimension()
    depth: Mapped[float] = _dimension()
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        server_default=true(),
        nullable=False,
    )
    vehicle_id: Mapped[int] = mapped_column(
        ForeignKey("vehicles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("vehicle_id", "name", name="uq_slots_vehicle_name"),
    )

    def __repr__(self) -> str:
        return f"<Slot(id={self.id}, vehicle_id={self.vehicle_id}, name={self.name})>"
