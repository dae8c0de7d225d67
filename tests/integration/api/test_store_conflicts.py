"""Integration tests for duplicates caught by the database itself.

A concurrent request can insert the same unique value between the lookup
and the insert. These tests disable the lookup so the insert reaches the
unique constraint, which must still answer 409.
"""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient

from kangaroute.modules.companies.repos import DUPLICATE_COMPANY_MESSAGE, CompanyRepository
from kangaroute.modules.slots.repos import DUPLICATE_SLOT_MESSAGE, SlotRepository
from kangaroute.modules.vehicles.repos import DUPLICATE_PLATE_MESSAGE, VehicleRepository
from tests.factories.company import CompanyRegisterFactory


pytestmark = pytest.mark.integration


class TestCompanyUniqueColumns:
    """Company email, username and tax ID."""

    async def test_register_same_email(self, client: AsyncClient):
        first = CompanyRegisterFactory.build().model_dump(by_alias=True)
        second = CompanyRegisterFactory.build(email=first["email"]).model_dump(by_alias=True)

        with patch.object(
            CompanyRepository, "find_duplicate", AsyncMock(return_value=None)
        ):
            created = await client.post("/api/companies", json=first)
            response = await client.post("/api/companies", json=second)

        assert created.status_code == 201
        assert response.status_code == 409
        data = response.json()
        assert data["detail"] == DUPLICATE_COMPANY_MESSAGE
        assert data["type"].endswith("company_exists")

        listed = await client.get("/api/companies")
        assert len(listed.json()["companies"]) == 1


class TestVehiclePlateIndex:
    """Active plates are unique per company."""

    async def test_create_same_plate(self, authenticated_client: AsyncClient, vehicle):
        with patch.object(
            VehicleRepository, "plate_taken", AsyncMock(return_value=False)
        ):
            response = await authenticated_client.post(
                "/api/vehicles",
                json={"licensePlate": vehicle.license_plate, "name": "Second Van"},
            )

        assert response.status_code == 409
        assert response.json()["detail"] == DUPLICATE_PLATE_MESSAGE

        listed = await authenticated_client.get("/api/vehicles")
        assert [v["id"] for v in listed.json()["vehicles"]] == [vehicle.id]

    async def test_rename_to_taken_plate(
        self, authenticated_client: AsyncClient, vehicle
    ):
        created = await authenticated_client.post(
            "/api/vehicles",
            json={"licensePlate": "9999-ZZZ", "name": "Second Van"},
        )
        other_id = created.json()["vehicle"]["id"]

        with patch.object(
            VehicleRepository, "plate_taken", AsyncMock(return_value=False)
        ):
            response = await authenticated_client.put(
                f"/api/vehicles/{other_id}",
                json={"licensePlate": vehicle.license_plate},
            )

        assert response.status_code == 409

        fetched = await authenticated_client.get(f"/api/vehicles/{other_id}")
        assert fetched.json()["vehicle"]["licensePlate"] == "9999-ZZZ"


class TestSlotNameConstraint:
    """Slot names are unique within a vehicle."""

    async def test_create_same_name(
        self, authenticated_client: AsyncClient, vehicle, slot
    ):
        with patch.object(SlotRepository, "name_taken", AsyncMock(return_value=False)):
            response = await authenticated_client.post(
                "/api/slots",
                json={
                    "name": slot.name,
                    "height": 40,
                    "width": 30,
                    "depth": 50,
                    "vehicleId": vehicle.id,
                },
            )

        assert response.status_code == 409
        assert response.json()["detail"] == DUPLICATE_SLOT_MESSAGE

        listed = await authenticated_client.get(f"/api/slots/vehicle/{vehicle.id}")
        assert [s["id"] for s in listed.json()["slots"]] == [slot.id]
