"""Authentication API routes.

Provides endpoints for:
- Company login
- Verifying a stored session token
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials

from kangaroute.core.auth.dependencies import bearer_scheme
from kangaroute.core.auth.service import AuthSvc
from kangaroute.modules.companies.schemas import (
    CompanyEnvelope,
    CompanyResponse,
    LoginRequest,
    LoginResponse,
)


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login with admin username and password",
    description="Authenticate a company and receive a bearer token valid for 24 hours.",
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
) -> LoginResponse:
    """Login with username and password."""
    company, token = await service.login(data.username, data.password)
    return LoginResponse(
        token=token,
        company=CompanyResponse.model_validate(company),
    )


@router.get(
    "/verify",
    response_model=CompanyEnvelope,
    summary="Verify session token",
    description="Returns the profile of the company the bearer token belongs to.",
)
async def verify(
    service: AuthSvc,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> CompanyEnvelope:
    """Verify the bearer token and return the company profile."""
    token = credentials.credentials if credentials else None
    company = await service.verify_token(token)
    return CompanyEnvelope(company=CompanyResponse.model_validate(company))
