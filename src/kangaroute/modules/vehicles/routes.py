"""Vehicle API routes."""

from fastapi import APIRouter, status

from kangaroute.core.auth.dependencies import TenantId
from kangaroute.core.schemas import MessageResponse
from kangaroute.modules.vehicles.schemas import (
    VehicleCreateRequest,
    VehicleEnvelope,
    VehicleListResponse,
    VehicleResponse,
    VehicleUpdateRequest,
)
from kangaroute.modules.vehicles.services import VehicleSvc


router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.post(
    "",
    response_model=VehicleEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a vehicle",
)
async def create_vehicle(
    data: VehicleCreateRequest,
    service: VehicleSvc,
    tenant_id: TenantId,
) -> VehicleEnvelope:
    """Add a vehicle to the caller's fleet."""
    vehicle = await service.create_vehicle(data, tenant_id)
    return VehicleEnvelope(vehicle=VehicleResponse.model_validate(vehicle))


@router.get(
    "",
    response_model=VehicleListResponse,
    summary="List vehicles",
    description="Returns the caller's active vehicles, newest first.",
)
async def list_vehicles(
    service: VehicleSvc,
    tenant_id: TenantId,
) -> VehicleListResponse:
    """List the caller's vehicles."""
    vehicles = await service.list_vehicles(tenant_id)
    return VehicleListResponse(
        vehicles=[VehicleResponse.model_validate(v) for v in vehicles],
    )


@router.get(
    "/{vehicle_id}",
    response_model=VehicleEnvelope,
    summary="Get a vehicle",
)
async def get_vehicle(
    vehicle_id: int,
    service: VehicleSvc,
    tenant_id: TenantId,
) -> VehicleEnvelope:
    """Get one of the caller's vehicles."""
    vehicle = await service.get_vehicle(vehicle_id, tenant_id)
    return VehicleEnvelope(vehicle=VehicleResponse.model_validate(vehicle))


@router.put(
    "/{vehicle_id}",
    response_model=VehicleEnvelope,
    summary="Update a vehicle",
)
async def update_vehicle(
    vehicle_id: int,
    data: VehicleUpdateRequest,
    service: VehicleSvc,
    tenant_id: TenantId,
) -> VehicleEnvelope:
    """Partially update one of the caller's vehicles."""
    vehicle = await service.update_vehicle(vehicle_id, data, tenant_id)
    return VehicleEnvelope(vehicle=VehicleResponse.model_validate(vehicle))


@router.delete(
    "/{vehicle_id}",
    response_model=MessageResponse,
    summary="Delete a vehicle",
    description="Soft-deletes the vehicle; its slots are no longer reachable.",
)
async def delete_vehicle(
    vehicle_id: int,
    service: VehicleSvc,
    tenant_id: TenantId,
) -> MessageResponse:
    """Delete one of the caller's vehicles."""
    await service.delete_vehicle(vehicle_id, tenant_id)
    return MessageResponse(message="Vehicle deleted successfully")
