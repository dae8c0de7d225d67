"""Slot service for business logic."""

from typing import Annotated, Any

import structlog
from fastapi import Depends

from kangaroute.core.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    service_boundary,
)
from kangaroute.core.utils.validation import require_fields, require_positive
from kangaroute.modules.slots.models import Slot
from kangaroute.modules.slots.repos import DUPLICATE_SLOT_MESSAGE, SlotRepo
from kangaroute.modules.slots.schemas import SlotCreateRequest, SlotUpdateRequest
from kangaroute.modules.vehicles.repos import VehicleRepo


logger = structlog.get_logger()

# Field name to the label used in error messages
DIMENSION_LABELS = {
    "height": "Height",
    "width": "Width",
    "depth": "Depth",
}


def _vehicle_not_found(vehicle_id: int) -> NotFoundError:
    return NotFoundError(
        "Vehicle not found",
        resource="vehicle",
        resource_id=str(vehicle_id),
    )


def _slot_not_found(slot_id: int) -> NotFoundError:
    return NotFoundError(
        "Slot not found",
        resource="slot",
        resource_id=str(slot_id),
    )


class SlotService:
    """Service for the slots inside a tenant's vehicles.

    Vehicle ownership is checked again on every call; a slot of an inactive
    vehicle, or of another company's vehicle, does not exist for the caller.
    """

    def __init__(self, repo: SlotRepo, vehicle_repo: VehicleRepo) -> None:
        self.repo = repo
        self.vehicle_repo = vehicle_repo

    @service_boundary(
        "slots.create",
        "Internal server error while creating the slot",
    )
    async def create_slot(self, data: SlotCreateRequest, tenant_id: int) -> Slot:
        """Add a slot to one of the tenant's vehicles.

        ``is_active`` defaults to True when omitted.

        Raises:
            ValidationError: If a required field is missing or a dimension
                is not greater than zero
            NotFoundError: If the vehicle is not an active vehicle of the tenant
            ConflictError: If the vehicle already has a slot with that name
        """
        require_fields(
            {
                "name": data.name,
                "height": data.height,
                "width": data.width,
                "depth": data.depth,
                "vehicle_id": data.vehicle_id,
            },
            "All fields are required",
        )

        non_positive = [
            name for name in DIMENSION_LABELS if getattr(data, name) <= 0
        ]
        if non_positive:
            raise ValidationError(
                "Dimensions must be greater than 0",
                errors=[
                    {"field": name, "message": "must be greater than 0"}
                    for name in non_positive
                ],
            )

        vehicle = await self.vehicle_repo.get_active(data.vehicle_id, tenant_id)
        if not vehicle:
            raise _vehicle_not_found(data.vehicle_id)

        if await self.repo.name_taken(vehicle.id, data.name):
            raise ConflictError(
                DUPLICATE_SLOT_MESSAGE,
                error_code="slot_exists",
            )

        slot = await self.repo.create(
            Slot(
                name=data.name,
                height=data.height,
                width=data.width,
                depth=data.depth,
                is_active=True if data.is_active is None else data.is_active,
                vehicle_id=vehicle.id,
            )
        )
        logger.info("slot_created", slot_id=slot.id, vehicle_id=vehicle.id)
        return slot

    @service_boundary(
        "slots.list",
        "Internal server error while fetching slots",
    )
    async def list_by_vehicle(self, vehicle_id: int, tenant_id: int) -> list[Slot]:
        """List every slot of one of the tenant's vehicles, newest first.

        Raises:
            NotFoundError: If the vehicle is not an active vehicle of the tenant
        """
        vehicle = await self.vehicle_repo.get_active(vehicle_id, tenant_id)
        if not vehicle:
            raise _vehicle_not_found(vehicle_id)
        return await self.repo.list_by_vehicle(vehicle.id)

    @service_boundary(
        "slots.get",
        "Internal server error while fetching the slot",
    )
    async def get_slot(self, slot_id: int, tenant_id: int) -> Slot:
        """Get a slot through its vehicle.

        Raises:
            NotFoundError: If missing, or its vehicle is inactive or owned
                by another company
        """
        slot = await self.repo.get_owned(slot_id, tenant_id)
        if not slot:
            raise _slot_not_found(slot_id)
        return slot

    @service_boundary(
        "slots.update",
        "Internal server error while updating the slot",
    )
    async def update_slot(
        self,
        slot_id: int,
        data: SlotUpdateRequest,
        tenant_id: int,
    ) -> Slot:
        """Apply a partial update to a slot.

        Each supplied dimension is checked on its own, so the message names
        the first offending one.

        Raises:
            NotFoundError: If the slot is not reachable for the tenant
            ValidationError: If nothing was supplied, a supplied field is
                blank, or a supplied dimension is not greater than zero
            ConflictError: If the new name is taken by another slot of the
                same vehicle
        """
        slot = await self.repo.get_owned(slot_id, tenant_id)
        if not slot:
            raise _slot_not_found(slot_id)

        changes: dict[str, Any] = data.model_dump(exclude_unset=True)
        if not changes:
            raise ValidationError(
                "No data provided to update",
                error_code="empty_update",
            )
        require_fields(changes, "Supplied fields cannot be empty")

        for name, label in DIMENSION_LABELS.items():
            require_positive(name, changes.get(name), label)

        new_name = changes.get("name")
        if (
            new_name is not None
            and new_name != slot.name
            and await self.repo.name_taken(slot.vehicle_id, new_name, exclude_id=slot.id)
        ):
            raise ConflictError(
                "Another slot in this vehicle already has that name",
                error_code="slot_exists",
            )

        for field, value in changes.items():
            setattr(slot, field, value)

        slot = await self.repo.update(slot)
        logger.info(
            "slot_updated",
            slot_id=slot.id,
            fields=sorted(changes),
        )
        return slot

    @service_boundary(
        "slots.delete",
        "Internal server error while deleting the slot",
    )
    async def delete_slot(self, slot_id: int, tenant_id: int) -> None:
        """Permanently delete a slot.

        Raises:
            NotFoundError: If no slot of an active vehicle of the tenant
                has that ID
        """
        if not await self.repo.delete_owned(slot_id, tenant_id):
            raise _slot_not_found(slot_id)
        logger.info("slot_deleted", slot_id=slot_id)


# Type alias for dependency injection
SlotSvc = Annotated[SlotService, Depends(SlotService)]
