"""Pydantic schemas for company operations.

Request fields are optional at the schema level: which fields are required
(and what counts as blank) is decided by the services, so a missing field
and an empty one produce the same 400 response.
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from kangaroute.core.schemas import CamelModel


# ============================================================
# Company Schemas
# ============================================================


class CompanyRegisterRequest(CamelModel):
    """Registration form for a new company."""

    company_name: str | None = None
    admin_username: str | None = None
    password: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    tax_id: str | None = None
    website: str | None = None


class CompanyUpdateRequest(CamelModel):
    """Profile edit. Only the fields present in the body are changed."""

    company_name: str | None = None
    admin_username: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    tax_id: str | None = None
    website: str | None = None


class CompanyResponse(CamelModel):
    """Sanitized company profile. Never includes the password hash."""

    id: int
    company_name: str
    admin_username: str
    email: str
    phone: str
    address: str
    tax_id: str
    website: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CompanyEnvelope(CamelModel):
    """Single-company response body."""

    company: CompanyResponse


class CompanyListResponse(CamelModel):
    """Company listing response body."""

    companies: list[CompanyResponse]


class RegisterResponse(CamelModel):
    """Registration response: the new profile plus a session token."""

    company: CompanyResponse
    token: str


# ============================================================
# Authentication Schemas
# ============================================================


class LoginRequest(CamelModel):
    """Username/password login."""

    username: str | None = None
    password: str | None = None


class LoginResponse(CamelModel):
    """Login response: a session token plus the sanitized profile."""

    token: str = Field(..., description="Bearer token valid for 24 hours")
    company: CompanyResponse
