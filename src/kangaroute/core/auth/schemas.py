"""Authentication schemas for token handling."""

from datetime import datetime

from pydantic import BaseModel

from kangaroute.core.constants import ACCESS_TOKEN_TYPE


class TokenData(BaseModel):
    """Tenant identity carried by a verified access token.

    Attributes:
        company_id: ID of the authenticated company (the tenant)
        admin_username: The company's admin username at issue time
        email: The company's email at issue time
        exp: Token expiration time
        type: Token type
    """

    company_id: int
    admin_username: str
    email: str
    exp: datetime
    type: str = ACCESS_TOKEN_TYPE
