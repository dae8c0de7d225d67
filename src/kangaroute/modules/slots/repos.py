"""Slot repository for database operations.

Slots carry no company column: ownership is always resolved through the
parent vehicle, which must be active and belong to the requesting company.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from kangaroute.api.dependencies import DBSession
from kangaroute.core.database import is_unique_violation, utcnow
from kangaroute.core.errors import ConflictError
from kangaroute.modules.slots.models import Slot
from kangaroute.modules.vehicles.models import Vehicle


DUPLICATE_SLOT_MESSAGE = "A slot with that name already exists in this vehicle"


def _owned_vehicle_ids(company_id: int):
    return select(Vehicle.id).where(
        Vehicle.company_id == company_id,
        Vehicle.is_active.is_(True),
    )


class SlotRepository:
    """Repository for Slot database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, slot: Slot) -> Slot:
        """Insert a new slot.

        Raises:
            ConflictError: If the vehicle already has a slot with that name
        """
        self.session.add(slot)
        await self._flush()
        await self.session.refresh(slot)
        return slot

    async def get_owned(self, slot_id: int, company_id: int) -> Slot | None:
        """Get a slot whose vehicle is active and owned by the company."""
        stmt = (
            select(Slot)
            .join(Vehicle, Slot.vehicle_id == Vehicle.id)
            .where(
                Slot.id == slot_id,
                Vehicle.company_id == company_id,
                Vehicle.is_active.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_vehicle(self, vehicle_id: int) -> list[Slot]:
        """List every slot of a vehicle, active or not, newest first."""
        stmt = (
            select(Slot)
            .where(Slot.vehicle_id == vehicle_id)
            .order_by(Slot.created_at.desc(), Slot.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def name_taken(
        self,
        vehicle_id: int,
        name: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Check whether the vehicle has a slot with that name."""
        stmt = select(Slot.id).where(
            Slot.vehicle_id == vehicle_id,
            Slot.name == name,
        )
        if exclude_id is not None:
            stmt = stmt.where(Slot.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def update(self, slot: Slot) -> Slot:
        """Stamp updated_at and flush pending changes to a slot."""
        slot.updated_at = utcnow()
        await self._flush()
        await self.session.refresh(slot)
        return slot

    async def delete_owned(self, slot_id: int, company_id: int) -> bool:
        """Delete a slot if its vehicle is active and owned by the company.

        Returns:
            True if a row was deleted
        """
        stmt = (
            delete(Slot)
            .where(
                Slot.id == slot_id,
                Slot.vehicle_id.in_(_owned_vehicle_ids(company_id)),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise ConflictError(
                DUPLICATE_SLOT_MESSAGE,
                error_code="slot_exists",
            ) from exc


# Type alias for dependency injection
SlotRepo = Annotated[SlotRepository, Depends(SlotRepository)]
