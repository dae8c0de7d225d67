"""Pydantic schemas for vehicle operations."""

from datetime import datetime

from pydantic import ConfigDict

from kangaroute.core.schemas import CamelModel


class VehicleCreateRequest(CamelModel):
    """New vehicle form."""

    license_plate: str | None = None
    name: str | None = None


class VehicleUpdateRequest(CamelModel):
    """Vehicle edit. Only the fields present in the body are changed."""

    license_plate: str | None = None
    name: str | None = None


class VehicleResponse(CamelModel):
    """Vehicle as returned by the API."""

    id: int
    license_plate: str
    name: str
    company_id: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class VehicleEnvelope(CamelModel):
    vehicle: VehicleResponse


class VehicleListResponse(CamelModel):
    vehicles: list[VehicleResponse]
