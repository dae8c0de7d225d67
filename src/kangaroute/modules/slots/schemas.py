"""Pydantic schemas for slot operations."""

from datetime import datetime
from typing import Annotated

from pydantic import ConfigDict, Field, computed_field

from kangaroute.core.constants import MAX_DIMENSION
from kangaroute.core.schemas import CamelModel


# Finite and within NUMERIC(10, 2); the "greater than 0" rule is the service's
Dimension = Annotated[float, Field(allow_inf_nan=False, le=MAX_DIMENSION)]


class SlotCreateRequest(CamelModel):
    """New slot form. Dimensions are in centimetres."""

    name: str | None = None
    height: Dimension | None = None
    width: Dimension | None = None
    depth: Dimension | None = None
    is_active: bool | None = None
    vehicle_id: int | None = None


class SlotUpdateRequest(CamelModel):
    """Slot edit. Only the fields present in the body are changed.

    The owning vehicle cannot be changed.
    """

    name: str | None = None
    height: Dimension | None = None
    width: Dimension | None = None
    depth: Dimension | None = None
    is_active: bool | None = None


class SlotResponse(CamelModel):
    """Slot as returned by the API, with dimensions as plain numbers."""

    id: int
    name: str
    height: float
    width: float
    depth: float
    is_active: bool
    vehicle_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def volume(self) -> float:
        """Interior volume in cubic centimetres."""
        return self.height * self.width * self.depth


class SlotEnvelope(CamelModel):
    slot: SlotResponse


class SlotListResponse(CamelModel):
    slots: list[SlotResponse]
