"""Unit tests for VehicleService with a mocked repository."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from kangaroute.core.errors import (
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from kangaroute.modules.vehicles.models import Vehicle
from kangaroute.modules.vehicles.schemas import VehicleCreateRequest, VehicleUpdateRequest
from kangaroute.modules.vehicles.services import VehicleService


pytestmark = pytest.mark.unit

TENANT_ID = 1


def make_mock_vehicle(**overrides) -> MagicMock:
    vehicle = MagicMock(spec=Vehicle)
    vehicle.id = overrides.get("id", 10)
    vehicle.license_plate = overrides.get("license_plate", "1234-ABC")
    vehicle.name = overrides.get("name", "Big Van")
    vehicle.company_id = overrides.get("company_id", TENANT_ID)
    vehicle.is_active = True
    return vehicle


@pytest.fixture
def repo() -> AsyncMock:
    repo = AsyncMock()
    repo.plate_taken.return_value = False
    repo.create.side_effect = lambda vehicle: vehicle
    repo.update.side_effect = lambda vehicle: vehicle
    return repo


@pytest.fixture
def service(repo: AsyncMock) -> VehicleService:
    return VehicleService(repo)


class TestCreateVehicle:
    """Tests for VehicleService.create_vehicle."""

    async def test_create_success(self, service: VehicleService, repo: AsyncMock):
        data = VehicleCreateRequest(license_plate="1234-ABC", name="Big Van")

        vehicle = await service.create_vehicle(data, TENANT_ID)

        assert isinstance(vehicle, Vehicle)
        assert vehicle.company_id == TENANT_ID
        repo.plate_taken.assert_awaited_once_with(TENANT_ID, "1234-ABC")

    @pytest.mark.parametrize(
        "data",
        [
            VehicleCreateRequest(name="Big Van"),
            VehicleCreateRequest(license_plate="1234-ABC", name=""),
            VehicleCreateRequest(license_plate="  ", name="Big Van"),
        ],
    )
    async def test_create_requires_fields(self, service: VehicleService, data):
        with pytest.raises(ValidationError):
            await service.create_vehicle(data, TENANT_ID)

    async def test_create_duplicate_plate(self, service: VehicleService, repo: AsyncMock):
        repo.plate_taken.return_value = True

        with pytest.raises(ConflictError):
            await service.create_vehicle(
                VehicleCreateRequest(license_plate="1234-ABC", name="Big Van"),
                TENANT_ID,
            )

        repo.create.assert_not_called()


class TestGetVehicle:
    """Tests for VehicleService.get_vehicle."""

    async def test_get_scoped_to_tenant(self, service: VehicleService, repo: AsyncMock):
        vehicle = make_mock_vehicle()
        repo.get_active.return_value = vehicle

        assert await service.get_vehicle(10, TENANT_ID) is vehicle
        repo.get_active.assert_awaited_once_with(10, TENANT_ID)

    async def test_get_missing(self, service: VehicleService, repo: AsyncMock):
        repo.get_active.return_value = None

        with pytest.raises(NotFoundError):
            await service.get_vehicle(10, TENANT_ID)

    async def test_list_store_failure(self, service: VehicleService, repo: AsyncMock):
        repo.list_active.side_effect = OperationalError("SELECT", {}, Exception("x"))

        with pytest.raises(InternalError):
            await service.list_vehicles(TENANT_ID)


class TestUpdateVehicle:
    """Tests for VehicleService.update_vehicle."""

    async def test_update_name_only(self, service: VehicleService, repo: AsyncMock):
        vehicle = make_mock_vehicle()
        repo.get_active.return_value = vehicle

        result = await service.update_vehicle(
            10, VehicleUpdateRequest(name="Small Van"), TENANT_ID
        )

        assert result.name == "Small Van"
        assert result.license_plate == "1234-ABC"
        repo.plate_taken.assert_not_called()

    async def test_update_missing(self, service: VehicleService, repo: AsyncMock):
        repo.get_active.return_value = None

        with pytest.raises(NotFoundError):
            await service.update_vehicle(
                10, VehicleUpdateRequest(name="Small Van"), TENANT_ID
            )

    async def test_update_empty(self, service: VehicleService, repo: AsyncMock):
        repo.get_active.return_value = make_mock_vehicle()

        with pytest.raises(ValidationError):
            await service.update_vehicle(10, VehicleUpdateRequest(), TENANT_ID)

    async def test_update_blank_field(self, service: VehicleService, repo: AsyncMock):
        repo.get_active.return_value = make_mock_vehicle()

        with pytest.raises(ValidationError):
            await service.update_vehicle(
                10, VehicleUpdateRequest(license_plate=""), TENANT_ID
            )

    async def test_update_plate_conflict(self, service: VehicleService, repo: AsyncMock):
        repo.get_active.return_value = make_mock_vehicle()
        repo.plate_taken.return_value = True

        with pytest.raises(ConflictError):
            await service.update_vehicle(
                10, VehicleUpdateRequest(license_plate="9999-ZZZ"), TENANT_ID
            )

        repo.plate_taken.assert_awaited_once_with(TENANT_ID, "9999-ZZZ", exclude_id=10)
        repo.update.assert_not_called()


class TestDeleteVehicle:
    """Tests for VehicleService.delete_vehicle."""

    async def test_delete_soft_deletes(self, service: VehicleService, repo: AsyncMock):
        vehicle = make_mock_vehicle()
        repo.get_active.return_value = vehicle

        await service.delete_vehicle(10, TENANT_ID)

        repo.soft_delete.assert_awaited_once_with(vehicle)

    async def test_delete_missing(self, service: VehicleService, repo: AsyncMock):
        repo.get_active.return_value = None

        with pytest.raises(NotFoundError):
            await service.delete_vehicle(10, TENANT_ID)

        repo.soft_delete.assert_not_called()
