"""Vehicle service for business logic."""

from typing import Annotated, Any

import structlog
from fastapi import Depends

from kangaroute.core.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    service_boundary,
)
from kangaroute.core.utils.validation import require_fields
from kangaroute.modules.vehicles.models import Vehicle
from kangaroute.modules.vehicles.repos import DUPLICATE_PLATE_MESSAGE, VehicleRepo
from kangaroute.modules.vehicles.schemas import (
    VehicleCreateRequest,
    VehicleUpdateRequest,
)


logger = structlog.get_logger()


def _not_found(vehicle_id: int) -> NotFoundError:
    return NotFoundError(
        "Vehicle not found",
        resource="vehicle",
        resource_id=str(vehicle_id),
    )


class VehicleService:
    """Service for a tenant's fleet.

    Every method takes the authenticated company's ID and never touches
    vehicles owned by anyone else.
    """

    def __init__(self, repo: VehicleRepo) -> None:
        self.repo = repo

    @service_boundary(
        "vehicles.create",
        "Internal server error while creating the vehicle",
    )
    async def create_vehicle(
        self,
        data: VehicleCreateRequest,
        tenant_id: int,
    ) -> Vehicle:
        """Add a vehicle to the tenant's fleet.

        Raises:
            ValidationError: If license plate or name is blank
            ConflictError: If the tenant already has an active vehicle
                with that plate
        """
        require_fields(
            {"license_plate": data.license_plate, "name": data.name},
            "License plate and name are required",
        )

        if await self.repo.plate_taken(tenant_id, data.license_plate):
            raise ConflictError(
                DUPLICATE_PLATE_MESSAGE,
                error_code="vehicle_exists",
            )

        vehicle = await self.repo.create(
            Vehicle(
                license_plate=data.license_plate,
                name=data.name,
                company_id=tenant_id,
            )
        )
        logger.info("vehicle_created", vehicle_id=vehicle.id)
        return vehicle

    @service_boundary(
        "vehicles.list",
        "Internal server error while fetching vehicles",
    )
    async def list_vehicles(self, tenant_id: int) -> list[Vehicle]:
        """List the tenant's active vehicles, newest first."""
        return await self.repo.list_active(tenant_id)

    @service_boundary(
        "vehicles.get",
        "Internal server error while fetching the vehicle",
    )
    async def get_vehicle(self, vehicle_id: int, tenant_id: int) -> Vehicle:
        """Get one of the tenant's active vehicles.

        Raises:
            NotFoundError: If missing, inactive, or owned by another company
        """
        vehicle = await self.repo.get_active(vehicle_id, tenant_id)
        if not vehicle:
            raise _not_found(vehicle_id)
        return vehicle

    @service_boundary(
        "vehicles.update",
        "Internal server error while updating the vehicle",
    )
    async def update_vehicle(
        self,
        vehicle_id: int,
        data: VehicleUpdateRequest,
        tenant_id: int,
    ) -> Vehicle:
        """Apply a partial update to a vehicle.

        Raises:
            NotFoundError: If missing, inactive, or owned by another company
            ValidationError: If nothing was supplied or a supplied field is blank
            ConflictError: If another active vehicle of the tenant holds the
                new plate
        """
        vehicle = await self.repo.get_active(vehicle_id, tenant_id)
        if not vehicle:
            raise _not_found(vehicle_id)

        changes: dict[str, Any] = data.model_dump(exclude_unset=True)
        if not changes:
            raise ValidationError(
                "No data provided to update",
                error_code="empty_update",
            )
        require_fields(changes, "License plate and name cannot be empty")

        if "license_plate" in changes and await self.repo.plate_taken(
            tenant_id,
            changes["license_plate"],
            exclude_id=vehicle.id,
        ):
            raise ConflictError(
                "Another vehicle already uses that license plate",
                error_code="vehicle_exists",
            )

        for field, value in changes.items():
            setattr(vehicle, field, value)

        vehicle = await self.repo.update(vehicle)
        logger.info(
            "vehicle_updated",
            vehicle_id=vehicle.id,
            fields=sorted(changes),
        )
        return vehicle

    @service_boundary(
        "vehicles.delete",
        "Internal server error while deleting the vehicle",
    )
    async def delete_vehicle(self, vehicle_id: int, tenant_id: int) -> None:
        """Soft-delete a vehicle. Its slots become unreachable.

        Raises:
            NotFoundError: If missing, already deleted, or owned by
                another company
        """
        vehicle = await self.repo.get_active(vehicle_id, tenant_id)
        if not vehicle:
            raise _not_found(vehicle_id)

        await self.repo.soft_delete(vehicle)
        logger.info("vehicle_deleted", vehicle_id=vehicle_id)


# Type alias for dependency injection
VehicleSvc = Annotated[VehicleService, Depends(VehicleService)]
