#!/usr/bin/env python
"""
Generate demo/seed data for development.

Every seeded company logs in with the password ``demo1234``.
"""

import argparse
import asyncio
import sys
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession


# Add src to path for imports
sys.path.insert(0, "src")

from kangaroute.core.auth.backend import hash_password
from kangaroute.core.database import async_session_factory
from kangaroute.modules.companies.models import Company
from kangaroute.modules.slots.models import Slot
from kangaroute.modules.vehicles.models import Vehicle


DEMO_PASSWORD = "demo1234"

DEFAULT_COMPANY: dict[str, Any] = {
    "company_name": "Happy Paws Transport",
    "admin_username": "happypaws",
    "email": "admin@happypaws.example",
    "phone": "+34 600 000 001",
    "address": "Calle Mayor 1, Madrid",
    "tax_id": "B00000001",
    "website": "https://happypaws.example",
    "vehicles": [
        {
            "license_plate": "1234-ABC",
            "name": "Big Van",
            "slots": [
                {"name": "A1", "height": 60, "width": 50, "depth": 80},
                {"name": "A2", "height": 60, "width": 50, "depth": 80},
                {"name": "B1", "height": 40, "width": 35, "depth": 55},
            ],
        },
        {
            "license_plate": "5678-DEF",
            "name": "City Car",
            "slots": [
                {"name": "Back seat", "height": 45, "width": 40, "depth": 60},
            ],
        },
    ],
}

DEMO_COMPANIES: list[dict[str, Any]] = [
    {
        "company_name": "Furry Express",
        "admin_username": "furryexpress",
        "email": "admin@furryexpress.example",
        "phone": "+34 600 000 002",
        "address": "Avenida del Puerto 22, Valencia",
        "tax_id": "B00000002",
        "website": None,
        "vehicles": [
            {
                # Same plate as Happy Paws: plates are unique per company only
                "license_plate": "1234-ABC",
                "name": "Transit",
                "slots": [
                    {"name": "Large", "height": 70, "width": 55, "depth": 90},
                    {"name": "Small", "height": 35, "width": 30, "depth": 50},
                ],
            },
        ],
    },
    {
        "company_name": "Pet Movers",
        "admin_username": "petmovers",
        "email": "admin@petmovers.example",
        "phone": "+34 600 000 003",
        "address": "Rambla 7, Barcelona",
        "tax_id": "B00000003",
        "website": "https://petmovers.example",
        "vehicles": [],
    },
]


async def seed_company(session: AsyncSession, data: dict[str, Any]) -> None:
    """Create one company with its vehicles and slots, unless it exists."""
    result = await session.execute(
        select(Company).where(Company.admin_username == data["admin_username"])
    )
    existing = result.scalar_one_or_none()

    if existing:
        print(f"Company already exists: {existing.company_name}")
        return

    fields = {k: v for k, v in data.items() if k != "vehicles"}
    company = Company(**fields, password_hash=hash_password(DEMO_PASSWORD))
    session.add(company)
    await session.flush()

    for vehicle_data in data["vehicles"]:
        vehicle = Vehicle(
            license_plate=vehicle_data["license_plate"],
            name=vehicle_data["name"],
            company_id=company.id,
        )
        session.add(vehicle)
        await session.flush()

        for slot_data in vehicle_data["slots"]:
            session.add(Slot(**slot_data, vehicle_id=vehicle.id))

    print(
        f"Created company: {company.company_name} "
        f"({company.admin_username}, {len(data['vehicles'])} vehicles)"
    )


async def seed_default() -> None:
    """Create the default demo company."""
    async with async_session_factory() as session:
        await seed_company(session, DEFAULT_COMPANY)
        await session.commit()


async def seed_demo() -> None:
    """Create demo data with multiple companies."""
    async with async_session_factory() as session:
        for data in [DEFAULT_COMPANY, *DEMO_COMPANIES]:
            await seed_company(session, data)
        await session.commit()


async def main(scenario: str) -> None:
    """Run the seeding based on scenario."""
    if scenario == "default":
        await seed_default()
    elif scenario == "demo":
        await seed_demo()
    else:
        print(f"Unknown scenario: {scenario}")
        print("Available scenarios: default, demo")
        sys.exit(1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed database with demo data")
    parser.add_argument(
        "--scenario",
        "-s",
        default="default",
        help="Seed scenario to run (default, demo)",
    )
    args = parser.parse_args()

    asyncio.run(main(args.scenario))
