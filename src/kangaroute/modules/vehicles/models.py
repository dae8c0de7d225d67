"""Vehicle database models."""

from sqlalchemy import ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from kangaroute.core.constants import MAX_LICENSE_PLATE_LENGTH, MAX_VEHICLE_NAME_LENGTH
from kangaroute.core.database.base import (
    Base,
    IntegerIDMixin,
    SoftDeleteMixin,
    TimestampMixin,
)


class Vehicle(Base, IntegerIDMixin, TimestampMixin, SoftDeleteMixin):
    """A transport vehicle owned by one company.

    Attributes:
        license_plate: Registration plate, unique per company among
            active vehicles
        name: Display name
        company_id: Owning company, never changes after creation
    """

    __tablename__ = "vehicles"

    license_plate: Mapped[str] = mapped_column(
        String(MAX_LICENSE_PLATE_LENGTH),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_VEHICLE_NAME_LENGTH),
        nullable=False,
    )
    company_id: Mapped[int] = mapped_column(
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        # Soft-deleted vehicles release their plate
        Index(
            "uq_vehicles_company_plate_active",
            "company_id",
            "license_plate",
            unique=True,
            postgresql_where=text("is_active = true"),
            sqlite_where=text("is_active = 1"),
        ),
    )

    def __repr__(self) -> str:
        return f"<Vehicle(id={self.id}, license_plate={self.license_plate})>"
