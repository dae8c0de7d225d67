"""Company database models."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from kangaroute.core.constants import (
    MAX_COMPANY_NAME_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_PHONE_LENGTH,
    MAX_TAX_ID_LENGTH,
    MAX_USERNAME_LENGTH,
    MAX_WEBSITE_LENGTH,
)
from kangaroute.core.database.base import (
    Base,
    IntegerIDMixin,
    SoftDeleteMixin,
    TimestampMixin,
)


class Company(Base, IntegerIDMixin, TimestampMixin, SoftDeleteMixin):
    """A registered transport company: the tenant root.

    Every vehicle and, through its vehicle, every slot belongs to exactly
    one company. Companies are soft-deleted only.

    Attributes:
        company_name: Trading name
        admin_username: Login name, unique across all companies
        password_hash: Bcrypt hash, never serialized
        email: Contact email, unique across all companies
        phone: Contact phone
        address: Postal address
        tax_id: Fiscal identifier, unique across all companies
        website: Optional website URL
    """

    __tablename__ = "companies"

    company_name: Mapped[str] = mapped_column(
        String(MAX_COMPANY_NAME_LENGTH),
        nullable=False,
    )
    admin_username: Mapped[str] = mapped_column(
        String(MAX_USERNAME_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
    )
    phone: Mapped[str] = mapped_column(
        String(MAX_PHONE_LENGTH),
        nullable=False,
    )
    address: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    tax_id: Mapped[str] = mapped_column(
        String(MAX_TAX_ID_LENGTH),
        nullable=False,
        unique=True,
    )
    website: Mapped[str | None] = mapped_column(
        String(MAX_WEBSITE_LENGTH),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, admin_username={self.admin_username})>"
