"""FastAPI dependencies for authentication.

This is the enforcing half of the session middleware: every tenant-scoped
route depends on ``CurrentTenant`` (or ``TenantId``), so a request without
a valid bearer token, or from a company deactivated since the token was
issued, is rejected with 401 before any service runs.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from kangaroute.api.dependencies import DBSession
from kangaroute.core.auth.backend import decode_token
from kangaroute.core.auth.schemas import TokenData
from kangaroute.core.constants import ACCESS_TOKEN_TYPE
from kangaroute.core.errors import UnauthorizedError


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_data(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Extract and verify token data from the Authorization header.

    Args:
        credentials: Bearer token credentials from the request

    Returns:
        Verified token data

    Raises:
        UnauthorizedError: If token is missing, invalid or expired
    """
    if not credentials:
        raise UnauthorizedError(
            "Missing authentication token",
            error_code="missing_token",
        )

    token_data = decode_token(credentials.credentials)
    if not token_data:
        raise UnauthorizedError(
            "Invalid or expired token",
            error_code="invalid_token",
        )

    if token_data.type != ACCESS_TOKEN_TYPE:
        raise UnauthorizedError(
            "Invalid token type",
            error_code="invalid_token_type",
        )

    return token_data


async def get_current_tenant(
    token_data: Annotated[TokenData, Depends(get_token_data)],
    db: DBSession,
) -> TokenData:
    """Get the session's tenant, ensuring the company is still active.

    Args:
        token_data: Verified token data
        db: Database session

    Returns:
        The token data of an active company

    Raises:
        UnauthorizedError: If the company was deactivated after the token
            was issued
    """
    from kangaroute.modules.companies.repos import CompanyRepository  # noqa: PLC0415

    company = await CompanyRepository(db).get_active_by_id(token_data.company_id)
    if not company:
        raise UnauthorizedError(
            "Company account is not active",
            error_code="company_inactive",
        )

    return token_data


async def get_tenant_id(
    token_data: Annotated[TokenData, Depends(get_current_tenant)],
) -> int:
    """Get the authenticated company's ID."""
    return token_data.company_id


# Type aliases for cleaner dependency injection
CurrentTenant = Annotated[TokenData, Depends(get_current_tenant)]
TenantId = Annotated[int, Depends(get_tenant_id)]
