"""Unit tests for SlotService with mocked repositories."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from kangaroute.core.errors import ConflictError, NotFoundError, ValidationError
from kangaroute.modules.slots.models import Slot
from kangaroute.modules.slots.schemas import SlotUpdateRequest
from kangaroute.modules.slots.services import SlotService
from tests.factories.fleet import SlotCreateFactory


pytestmark = pytest.mark.unit

TENANT_ID = 1
VEHICLE_ID = 10


def make_mock_slot(**overrides) -> MagicMock:
    slot = MagicMock(spec=Slot)
    slot.id = overrides.get("id", 100)
    slot.name = overrides.get("name", "A1")
    slot.height = overrides.get("height", 60.0)
    slot.width = overrides.get("width", 50.0)
    slot.depth = overrides.get("depth", 80.0)
    slot.is_active = overrides.get("is_active", True)
    slot.vehicle_id = overrides.get("vehicle_id", VEHICLE_ID)
    return slot


@pytest.fixture
def repo() -> AsyncMock:
    repo = AsyncMock()
    repo.name_taken.return_value = False
    repo.create.side_effect = lambda slot: slot
    repo.update.side_effect = lambda slot: slot
    return repo


@pytest.fixture
def vehicle_repo() -> AsyncMock:
    vehicle_repo = AsyncMock()
    vehicle = MagicMock()
    vehicle.id = VEHICLE_ID
    vehicle_repo.get_active.return_value = vehicle
    return vehicle_repo


@pytest.fixture
def service(repo: AsyncMock, vehicle_repo: AsyncMock) -> SlotService:
    return SlotService(repo, vehicle_repo)


class TestCreateSlot:
    """Tests for SlotService.create_slot."""

    async def test_create_success(self, service: SlotService, vehicle_repo: AsyncMock):
        data = SlotCreateFactory.build(vehicle_id=VEHICLE_ID, is_active=False)

        slot = await service.create_slot(data, TENANT_ID)

        assert isinstance(slot, Slot)
        assert slot.vehicle_id == VEHICLE_ID
        assert slot.is_active is False
        vehicle_repo.get_active.assert_awaited_once_with(VEHICLE_ID, TENANT_ID)

    async def test_create_defaults_to_active(self, service: SlotService):
        data = SlotCreateFactory.build(vehicle_id=VEHICLE_ID, is_active=None)

        slot = await service.create_slot(data, TENANT_ID)

        assert slot.is_active is True

    @pytest.mark.parametrize("field", ["name", "height", "width", "depth", "vehicle_id"])
    async def test_create_requires_field(self, service: SlotService, field: str):
        data = SlotCreateFactory.build(**{"vehicle_id": VEHICLE_ID, field: None})

        with pytest.raises(ValidationError) as exc_info:
            await service.create_slot(data, TENANT_ID)

        assert exc_info.value.details["missing_fields"] == [field]

    @pytest.mark.parametrize("field", ["height", "width", "depth"])
    @pytest.mark.parametrize("value", [0, -5])
    async def test_create_rejects_non_positive_dimension(
        self, service: SlotService, repo: AsyncMock, field: str, value: float
    ):
        data = SlotCreateFactory.build(vehicle_id=VEHICLE_ID, **{field: value})

        with pytest.raises(ValidationError) as exc_info:
            await service.create_slot(data, TENANT_ID)

        assert exc_info.value.message == "Dimensions must be greater than 0"
        repo.create.assert_not_called()

    async def test_create_foreign_vehicle(
        self, service: SlotService, vehicle_repo: AsyncMock, repo: AsyncMock
    ):
        """A vehicle that is not the tenant's should be reported as missing."""
        vehicle_repo.get_active.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await service.create_slot(
                SlotCreateFactory.build(vehicle_id=99), TENANT_ID
            )

        assert exc_info.value.message == "Vehicle not found"
        repo.create.assert_not_called()

    async def test_create_duplicate_name(self, service: SlotService, repo: AsyncMock):
        repo.name_taken.return_value = True

        with pytest.raises(ConflictError):
            await service.create_slot(
                SlotCreateFactory.build(vehicle_id=VEHICLE_ID, name="A1"), TENANT_ID
            )

        repo.name_taken.assert_awaited_once_with(VEHICLE_ID, "A1")


class TestListAndGet:
    """Tests for SlotService.list_by_vehicle and get_slot."""

    async def test_list_checks_vehicle(
        self, service: SlotService, vehicle_repo: AsyncMock, repo: AsyncMock
    ):
        vehicle_repo.get_active.return_value = None

        with pytest.raises(NotFoundError):
            await service.list_by_vehicle(VEHICLE_ID, TENANT_ID)

        repo.list_by_vehicle.assert_not_called()

    async def test_list_returns_slots(self, service: SlotService, repo: AsyncMock):
        slots = [make_mock_slot(id=2), make_mock_slot(id=1)]
        repo.list_by_vehicle.return_value = slots

        assert await service.list_by_vehicle(VEHICLE_ID, TENANT_ID) == slots
        repo.list_by_vehicle.assert_awaited_once_with(VEHICLE_ID)

    async def test_get_through_vehicle(self, service: SlotService, repo: AsyncMock):
        slot = make_mock_slot()
        repo.get_owned.return_value = slot

        assert await service.get_slot(100, TENANT_ID) is slot
        repo.get_owned.assert_awaited_once_with(100, TENANT_ID)

    async def test_get_missing(self, service: SlotService, repo: AsyncMock):
        repo.get_owned.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_slot(100, TENANT_ID)

        assert exc_info.value.message == "Slot not found"


class TestUpdateSlot:
    """Tests for SlotService.update_slot."""

    async def test_update_partial(self, service: SlotService, repo: AsyncMock):
        slot = make_mock_slot()
        repo.get_owned.return_value = slot

        result = await service.update_slot(
            100, SlotUpdateRequest(width=55), TENANT_ID
        )

        assert result.width == 55
        assert result.height == 60.0
        assert result.name == "A1"

    async def test_update_empty(self, service: SlotService, repo: AsyncMock):
        repo.get_owned.return_value = make_mock_slot()

        with pytest.raises(ValidationError):
            await service.update_slot(100, SlotUpdateRequest(), TENANT_ID)

    @pytest.mark.parametrize(
        ("field", "label"),
        [("height", "Height"), ("width", "Width"), ("depth", "Depth")],
    )
    async def test_update_names_bad_dimension(
        self, service: SlotService, repo: AsyncMock, field: str, label: str
    ):
        repo.get_owned.return_value = make_mock_slot()

        with pytest.raises(ValidationError) as exc_info:
            await service.update_slot(
                100, SlotUpdateRequest(**{field: 0}), TENANT_ID
            )

        assert exc_info.value.message == f"{label} must be greater than 0"
        repo.update.assert_not_called()

    async def test_update_rename_conflict(self, service: SlotService, repo: AsyncMock):
        repo.get_owned.return_value = make_mock_slot()
        repo.name_taken.return_value = True

        with pytest.raises(ConflictError):
            await service.update_slot(
                100, SlotUpdateRequest(name="B1"), TENANT_ID
            )

        repo.name_taken.assert_awaited_once_with(VEHICLE_ID, "B1", exclude_id=100)

    async def test_update_same_name_skips_check(
        self, service: SlotService, repo: AsyncMock
    ):
        repo.get_owned.return_value = make_mock_slot(name="A1")

        await service.update_slot(100, SlotUpdateRequest(name="A1"), TENANT_ID)

        repo.name_taken.assert_not_called()

    async def test_update_missing(self, service: SlotService, repo: AsyncMock):
        repo.get_owned.return_value = None

        with pytest.raises(NotFoundError):
            await service.update_slot(100, SlotUpdateRequest(name="B1"), TENANT_ID)


class TestDeleteSlot:
    """Tests for SlotService.delete_slot."""

    async def test_delete(self, service: SlotService, repo: AsyncMock):
        repo.delete_owned.return_value = True

        await service.delete_slot(100, TENANT_ID)

        repo.delete_owned.assert_awaited_once_with(100, TENANT_ID)

    async def test_delete_missing(self, service: SlotService, repo: AsyncMock):
        repo.delete_owned.return_value = False

        with pytest.raises(NotFoundError):
            await service.delete_slot(100, TENANT_ID)
