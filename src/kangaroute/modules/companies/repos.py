"""Company repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from kangaroute.api.dependencies import DBSession
from kangaroute.core.database import is_unique_violation, utcnow
from kangaroute.core.errors import ConflictError
from kangaroute.modules.companies.models import Company


DUPLICATE_COMPANY_MESSAGE = (
    "A company with that email, username or tax ID already exists"
)


class CompanyRepository:
    """Repository for Company database operations.

    Read paths only ever return active companies, except the uniqueness
    lookup, which deliberately spans inactive rows too.
    """

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, company: Company) -> Company:
        """Insert a new company.

        Raises:
            ConflictError: If a concurrent registration won the race for a
                unique column
        """
        self.session.add(company)
        await self._flush()
        await self.session.refresh(company)
        return company

    async def get_active_by_id(self, company_id: int) -> Company | None:
        """Get an active company by ID."""
        stmt = select(Company).where(
            Company.id == company_id,
            Company.is_active.is_(True),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_username(self, admin_username: str) -> Company | None:
        """Get an active company by its admin username."""
        stmt = select(Company).where(
            Company.admin_username == admin_username,
            Company.is_active.is_(True),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_duplicate(
        self,
        *,
        email: str | None = None,
        admin_username: str | None = None,
        tax_id: str | None = None,
        exclude_id: int | None = None,
    ) -> int | None:
        """Return the ID of any company sharing one of the unique fields.

        Active and inactive rows are both considered. Fields passed as None
        are not checked.

        Args:
            email: Email to look for
            admin_username: Admin username to look for
            tax_id: Tax ID to look for
            exclude_id: Company to ignore (the one being updated)

        Returns:
            The conflicting company's ID, or None
        """
        conditions = []
        if email is not None:
            conditions.append(Company.email == email)
        if admin_username is not None:
            conditions.append(Company.admin_username == admin_username)
        if tax_id is not None:
            conditions.append(Company.tax_id == tax_id)
        if not conditions:
            return None

        stmt = select(Company.id).where(or_(*conditions))
        if exclude_id is not None:
            stmt = stmt.where(Company.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def list_active(self) -> list[Company]:
        """List active companies, newest first."""
        stmt = (
            select(Company)
            .where(Company.is_active.is_(True))
            .order_by(Company.created_at.desc(), Company.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, company: Company) -> Company:
        """Stamp updated_at and flush pending changes to a company.

        Raises:
            ConflictError: If a unique column collided at the store level
        """
        company.updated_at = utcnow()
        await self._flush()
        await self.session.refresh(company)
        return company

    async def touch(self, company: Company) -> Company:
        """Refresh updated_at without changing anything else."""
        return await self.update(company)

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise
            raise ConflictError(
                DUPLICATE_COMPANY_MESSAGE,
                error_code="company_exists",
            ) from exc


# Type alias for dependency injection
CompanyRepo = Annotated[CompanyRepository, Depends(CompanyRepository)]
