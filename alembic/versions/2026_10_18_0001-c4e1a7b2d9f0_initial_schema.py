"""initial_schema

Revision ID: c4e1a7b2d9f0
Revises:
Create Date: 2026-10-18 00:01:00.000000

This migration creates:
- companies (tenant root)
- vehicles, with a plate index that only covers active rows
- slots, unique by name within a vehicle
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "c4e1a7b2d9f0"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "companies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("company_name", sa.String(length=255), nullable=False),
        sa.Column("admin_username", sa.String(length=100), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("tax_id", sa.String(length=50), nullable=False),
        sa.Column("website", sa.String(length=255), nullable=True),
        sa.Column(
            "is_active",
            sa.Boolean(),
            server_default=sa.true(),
            nullable=False,
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("tax_id"),
    )
    op.create_index(
        "ix_companies_admin_username",
        "companies",
        ["admin_username"],
        unique=True,
    )

    op.create_table(
        "vehicles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("license_plate", sa.String(length=20), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column(
            "is_active",
            sa.Boolean(),
            server_default=sa.true(),
            nullable=False,
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["company_id"],
            ["companies.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_vehicles_company_id",
        "vehicles",
        ["company_id"],
    )
    op.create_index(
        "uq_vehicles_company_plate_active",
        "vehicles",
        ["company_id", "license_plate"],
        unique=True,
        postgresql_where=sa.text("is_active = true"),
    )

    op.create_table(
        "slots",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("height", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("width", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("depth", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column(
            "is_active",
            sa.Boolean(),
            server_default=sa.true(),
            nullable=False,
        ),
        sa.Column("vehicle_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["vehicle_id"],
            ["vehicles.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("vehicle_id", "name", name="uq_slots_vehicle_name"),
    )
    op.create_index(
        "ix_slots_vehicle_id",
        "slots",
        ["vehicle_id"],
    )


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index("ix_slots_vehicle_id", table_name="slots")
    op.drop_table("slots")

    op.drop_index("uq_vehicles_company_plate_active", table_name="vehicles")
    op.drop_index("ix_vehicles_company_id", table_name="vehicles")
    op.drop_table("vehicles")

    op.drop_index("ix_companies_admin_username", table_name="companies")
    op.drop_table("companies")
