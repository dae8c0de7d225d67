"""Authentication service for login and session verification."""

from typing import Annotated

import structlog
from fastapi import Depends

from kangaroute.api.dependencies import DBSession
from kangaroute.core.auth.backend import (
    create_access_token,
    decode_token,
    verify_password,
)
from kangaroute.core.constants import ACCESS_TOKEN_TYPE
from kangaroute.core.errors import UnauthorizedError, service_boundary
from kangaroute.core.utils.validation import require_fields
from kangaroute.modules.companies.models import Company
from kangaroute.modules.companies.repos import CompanyRepository


logger = structlog.get_logger()

# Same message for unknown user and wrong password
INVALID_CREDENTIALS_MESSAGE = "Incorrect username or password"


class AuthService:
    """Service for authentication operations.

    Handles company login and verification of existing sessions.
    """

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.company_repo = CompanyRepository(db)

    @service_boundary("auth.login")
    async def login(self, username: str | None, password: str | None) -> tuple[Company, str]:
        """Authenticate a company with its admin username and password.

        Args:
            username: The company's admin username
            password: Plain text password

        Returns:
            Tuple of (company, access token)

        Raises:
            ValidationError: If username or password is blank
            UnauthorizedError: If credentials are invalid
        """
        require_fields(
            {"username": username, "password": password},
            "Username and password are required",
        )

        company = await self.company_repo.get_active_by_username(username)
        if not company or not verify_password(password, company.password_hash):
            logger.info("login_rejected", username=username)
            raise UnauthorizedError(
                INVALID_CREDENTIALS_MESSAGE,
                error_code="invalid_credentials",
            )

        token = create_access_token(
            company.id,
            company.admin_username,
            company.email,
        )

        # Record the login
        company = await self.company_repo.touch(company)

        logger.info("login_succeeded", company_id=company.id)
        return company, token

    @service_boundary("auth.verify")
    async def verify_token(self, token: str | None) -> Company:
        """Resolve a bearer token to the company it was issued for.

        Args:
            token: The raw bearer token

        Returns:
            The active company

        Raises:
            UnauthorizedError: If the token is missing, fails verification,
                or its company is missing or inactive
        """
        if not token:
            raise UnauthorizedError(
                "Missing authentication token",
                error_code="missing_token",
            )

        token_data = decode_token(token)
        if not token_data or token_data.type != ACCESS_TOKEN_TYPE:
            raise UnauthorizedError(
                "Invalid token",
                error_code="invalid_token",
            )

        company = await self.company_repo.get_active_by_id(token_data.company_id)
        if not company:
            raise UnauthorizedError(
                "Invalid token",
                error_code="invalid_token",
            )

        return company


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
