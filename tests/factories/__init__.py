"""Test factories for generating test data."""

from tests.factories.company import CompanyRegisterFactory
from tests.factories.fleet import SlotCreateFactory, VehicleCreateFactory


__all__ = [
    "CompanyRegisterFactory",
    "SlotCreateFactory",
    "VehicleCreateFactory",
]
