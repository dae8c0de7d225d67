"""Company service for business logic."""

from typing import Annotated, Any

import structlog
from fastapi import Depends

from kangaroute.core.auth.backend import create_access_token, hash_password
from kangaroute.core.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    service_boundary,
)
from kangaroute.core.utils.validation import is_blank, require_fields
from kangaroute.modules.companies.models import Company
from kangaroute.modules.companies.repos import DUPLICATE_COMPANY_MESSAGE, CompanyRepo
from kangaroute.modules.companies.schemas import (
    CompanyRegisterRequest,
    CompanyUpdateRequest,
)


logger = structlog.get_logger()

REQUIRED_FIELDS_MESSAGE = "All required fields must be provided"

# Profile fields that may never be blank once supplied
REQUIRED_PROFILE_FIELDS = (
    "company_name",
    "admin_username",
    "email",
    "phone",
    "address",
    "tax_id",
)


class CompanyService:
    """Service for company registration and profile management."""

    def __init__(self, repo: CompanyRepo) -> None:
        self.repo = repo

    @service_boundary(
        "companies.register",
        "Internal server error while registering the company",
    )
    async def register(self, data: CompanyRegisterRequest) -> tuple[Company, str]:
        """Register a new company and open a session for it.

        Args:
            data: Registration form

        Returns:
            Tuple of (company, access token)

        Raises:
            ValidationError: If any required field is blank
            ConflictError: If email, admin username or tax ID is taken,
                by an active or an inactive company
        """
        require_fields(
            {
                "company_name": data.company_name,
                "admin_username": data.admin_username,
                "password": data.password,
                "email": data.email,
                "phone": data.phone,
                "address": data.address,
                "tax_id": data.tax_id,
            },
            REQUIRED_FIELDS_MESSAGE,
        )

        # One combined lookup; the message does not say which field collided
        duplicate = await self.repo.find_duplicate(
            email=data.email,
            admin_username=data.admin_username,
            tax_id=data.tax_id,
        )
        if duplicate is not None:
            raise ConflictError(
                DUPLICATE_COMPANY_MESSAGE,
                error_code="company_exists",
            )

        company = Company(
            company_name=data.company_name,
            admin_username=data.admin_username,
            password_hash=hash_password(data.password),
            email=data.email,
            phone=data.phone,
            address=data.address,
            tax_id=data.tax_id,
            website=None if is_blank(data.website) else data.website,
        )
        company = await self.repo.create(company)

        token = create_access_token(
            company.id,
            company.admin_username,
            company.email,
        )

        logger.info("company_registered", company_id=company.id)
        return company, token

    @service_boundary(
        "companies.list",
        "Internal server error while fetching companies",
    )
    async def list_companies(self) -> list[Company]:
        """List active companies, newest first."""
        return await self.repo.list_active()

    @service_boundary(
        "companies.update",
        "Internal server error while updating the company",
    )
    async def update_company(
        self,
        company_id: int,
        data: CompanyUpdateRequest,
        tenant_id: int,
    ) -> Company:
        """Apply a partial profile update.

        Only fields present in the request are written. A present required
        field must not be blank; ``website`` may be cleared.

        Args:
            company_id: The company to update
            data: Fields to change
            tenant_id: The authenticated company making the request

        Returns:
            The updated company

        Raises:
            ValidationError: If nothing was supplied or a required field is blank
            NotFoundError: If no active company has that ID, or it is not
                the caller's own company
            ConflictError: If another company holds a supplied email,
                admin username or tax ID
        """
        changes: dict[str, Any] = data.model_dump(exclude_unset=True)
        if not changes:
            raise ValidationError(
                "No data provided to update",
                error_code="empty_update",
            )

        require_fields(
            {
                name: changes[name]
                for name in REQUIRED_PROFILE_FIELDS
                if name in changes
            },
            REQUIRED_FIELDS_MESSAGE,
        )

        company = None
        if company_id == tenant_id:
            company = await self.repo.get_active_by_id(company_id)
        if not company:
            raise NotFoundError(
                "Company not found",
                resource="company",
                resource_id=str(company_id),
            )

        duplicate = await self.repo.find_duplicate(
            email=changes.get("email"),
            admin_username=changes.get("admin_username"),
            tax_id=changes.get("tax_id"),
            exclude_id=company.id,
        )
        if duplicate is not None:
            raise ConflictError(
                "Another company already uses that email, username or tax ID",
                error_code="company_exists",
            )

        if "website" in changes and is_blank(changes["website"]):
            changes["website"] = None

        for field, value in changes.items():
            setattr(company, field, value)

        company = await self.repo.update(company)
        logger.info(
            "company_updated",
            company_id=company.id,
            fields=sorted(changes),
        )
        return company


# Type alias for dependency injection
CompanySvc = Annotated[CompanyService, Depends(CompanyService)]
