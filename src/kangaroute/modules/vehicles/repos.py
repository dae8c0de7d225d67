"""Vehicle repository for database operations.

Every query is scoped to one company and to active rows; a vehicle that
belongs to another tenant is indistinguishable from one that does not exist.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from kangaroute.api.dependencies import DBSession
from kangaroute.core.database import is_unique_violation, utcnow
from kangaroute.core.errors import ConflictError
from kangaroute.modules.vehicles.models import Vehicle


DUPLICATE_PLATE_MESSAGE = "A vehicle with that license plate already exists"


class VehicleRepository:
    """Repository for Vehicle database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, vehicle: Vehicle) -> Vehicle:
        """Insert a new vehicle.

        Raises:
            ConflictError: If the partial unique index rejected the plate
        """
        self.session.add(vehicle)
        await self._flush()
        await self.session.refresh(vehicle)
        return vehicle

    async def get_active(self, vehicle_id: int, company_id: int) -> Vehicle | None:
        """Get an active vehicle owned by the given company."""
        stmt = select(Vehicle).where(
            Vehicle.id == vehicle_id,
            Vehicle.company_id == company_id,
            Vehicle.is_active.is_(True),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_active(self, company_id: int) -> list[Vehicle]:
        """List a company's active vehicles, newest first."""
        stmt = (
            select(Vehicle)
            .where(
                Vehicle.company_id == company_id,
                Vehicle.is_active.is_(True),
            )
            .order_by(Vehicle.created_at.desc(), Vehicle.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def plate_taken(
        self,
        company_id: int,
        license_plate: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Check whether another active vehicle of the company holds a plate."""
        stmt = select(Vehicle.id).where(
            Vehicle.company_id == company_id,
            Vehicle.license_plate == license_plate,
            Vehicle.is_active.is_(True),
        )
        if exclude_id is not None:
            stmt = stmt.where(Vehicle.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def update(self, vehicle: Vehicle) -> Vehicle:
        """Stamp updated_at and flush pending changes to a vehicle."""
        vehicle.updated_at = utcnow()
        await self._flush()
        await self.session.refresh(vehicle)
        return vehicle

    async def soft_delete(self, vehicle: Vehicle) -> None:
        """Mark a vehicle inactive."""
        vehicle.is_active = False
        vehicle.updated_at = utcnow()
        await self.session.flush()

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise ConflictError(
                DUPLICATE_PLATE_MESSAGE,
                error_code="vehicle_exists",
            ) from exc


# Type alias for dependency injection
VehicleRepo = Annotated[VehicleRepository, Depends(VehicleRepository)]
