"""Helpers shared by fixtures and tests."""

from sqlalchemy.ext.asyncio import AsyncSession

from kangaroute.core.auth.backend import create_access_token, hash_password
from kangaroute.modules.companies.models import Company
from tests.factories.company import CompanyRegisterFactory


TEST_PASSWORD = "testpassword123"


async def make_company(db: AsyncSession, **overrides) -> Company:
    """Persist an active company whose password is TEST_PASSWORD."""
    data = CompanyRegisterFactory.build(**overrides).model_dump(exclude={"password"})
    company = Company(**data, password_hash=hash_password(TEST_PASSWORD))
    db.add(company)
    await db.commit()
    await db.refresh(company)
    return company


def bearer_for(company: Company) -> dict[str, str]:
    """Authorization header carrying a valid token for a company."""
    token = create_access_token(company.id, company.admin_username, company.email)
    return {"Authorization": f"Bearer {token}"}
