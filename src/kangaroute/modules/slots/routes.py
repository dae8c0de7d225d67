"""Slot API routes."""

from fastapi import APIRouter, status

from kangaroute.core.auth.dependencies import TenantId
from kangaroute.core.schemas import MessageResponse
from kangaroute.modules.slots.schemas import (
    SlotCreateRequest,
    SlotEnvelope,
    SlotListResponse,
    SlotResponse,
    SlotUpdateRequest,
)
from kangaroute.modules.slots.services import SlotSvc


router = APIRouter(prefix="/slots", tags=["slots"])


@router.post(
    "",
    response_model=SlotEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a slot",
    description="Adds a slot to one of the caller's vehicles.",
)
async def create_slot(
    data: SlotCreateRequest,
    service: SlotSvc,
    tenant_id: TenantId,
) -> SlotEnvelope:
    """Create a slot."""
    slot = await service.create_slot(data, tenant_id)
    return SlotEnvelope(slot=SlotResponse.model_validate(slot))


@router.get(
    "/vehicle/{vehicle_id}",
    response_model=SlotListResponse,
    summary="List a vehicle's slots",
)
async def list_slots_by_vehicle(
    vehicle_id: int,
    service: SlotSvc,
    tenant_id: TenantId,
) -> SlotListResponse:
    """List the slots of one of the caller's vehicles."""
    slots = await service.list_by_vehicle(vehicle_id, tenant_id)
    return SlotListResponse(slots=[SlotResponse.model_validate(s) for s in slots])


@router.get(
    "/{slot_id}",
    response_model=SlotEnvelope,
    summary="Get a slot",
)
async def get_slot(
    slot_id: int,
    service: SlotSvc,
    tenant_id: TenantId,
) -> SlotEnvelope:
    """Get a slot."""
    slot = await service.get_slot(slot_id, tenant_id)
    return SlotEnvelope(slot=SlotResponse.model_validate(slot))


@router.put(
    "/{slot_id}",
    response_model=SlotEnvelope,
    summary="Update a slot",
)
async def update_slot(
    slot_id: int,
    data: SlotUpdateRequest,
    service: SlotSvc,
    tenant_id: TenantId,
) -> SlotEnvelope:
    """Partially update a slot."""
    slot = await service.update_slot(slot_id, data, tenant_id)
    return SlotEnvelope(slot=SlotResponse.model_validate(slot))


@router.delete(
    "/{slot_id}",
    response_model=MessageResponse,
    summary="Delete a slot",
)
async def delete_slot(
    slot_id: int,
    service: SlotSvc,
    tenant_id: TenantId,
) -> MessageResponse:
    """Delete a slot."""
    await service.delete_slot(slot_id, tenant_id)
    return MessageResponse(message="Slot deleted successfully")
