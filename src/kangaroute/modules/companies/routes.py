"""Company API routes."""

from fastapi import APIRouter, status

from kangaroute.core.auth.dependencies import TenantId
from kangaroute.modules.companies.schemas import (
    CompanyEnvelope,
    CompanyListResponse,
    CompanyRegisterRequest,
    CompanyResponse,
    CompanyUpdateRequest,
    RegisterResponse,
)
from kangaroute.modules.companies.services import CompanySvc


router = APIRouter(prefix="/companies", tags=["companies"])


@router.post(
    "",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a company",
    description="Creates a new company (tenant) and returns a session token for it.",
)
async def register_company(
    data: CompanyRegisterRequest,
    service: CompanySvc,
) -> RegisterResponse:
    """Register a new company."""
    company, token = await service.register(data)
    return RegisterResponse(
        company=CompanyResponse.model_validate(company),
        token=token,
    )


@router.get(
    "",
    response_model=CompanyListResponse,
    summary="List companies",
    description="Returns every active company, newest first.",
)
async def list_companies(service: CompanySvc) -> CompanyListResponse:
    """List active companies."""
    companies = await service.list_companies()
    return CompanyListResponse(
        companies=[CompanyResponse.model_validate(c) for c in companies],
    )


@router.put(
    "/{company_id}",
    response_model=CompanyEnvelope,
    summary="Update company profile",
    description=(
        "Partially updates the authenticated company's own profile. "
        "Requires a bearer token issued for the company in the path; "
        "without one the request is rejected with 401, and any other "
        "company ID answers 404."
    ),
)
async def update_company(
    company_id: int,
    data: CompanyUpdateRequest,
    service: CompanySvc,
    tenant_id: TenantId,
) -> CompanyEnvelope:
    """Update the caller's company profile."""
    company = await service.update_company(company_id, data, tenant_id)
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))
