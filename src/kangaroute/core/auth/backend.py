"""Authentication backend for JWT and password handling.

This module provides the two credential capabilities the services rely on:
- Password hashing with bcrypt
- Signing and verifying access tokens that carry the tenant identity
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from kangaroute.config import settings
from kangaroute.core.auth.schemas import TokenData
from kangaroute.core.constants import ACCESS_TOKEN_TYPE


# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


# ============================================================
# Password Utilities
# ============================================================


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Bcrypt hash of the password
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# ============================================================
# JWT Token Utilities
# ============================================================


def create_access_token(
    company_id: int,
    admin_username: str,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed access token for a company.

    Args:
        company_id: The company's ID
        admin_username: The company's admin username
        email: The company's email
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT (three dot-separated segments)
    """
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.access_token_expire_hours)

    to_encode: dict[str, Any] = {
        "sub": str(company_id),
        "companyId": company_id,
        "adminUsername": admin_username,
        "email": email,
        "type": ACCESS_TOKEN_TYPE,
        "iat": now,
        "exp": now + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> TokenData | None:
    """Verify a JWT and extract the tenant identity.

    The signature and expiry are both checked; the payload is never trusted
    on its own.

    Args:
        token: The JWT token to decode

    Returns:
        TokenData if valid, None if invalid, expired or missing claims
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None

    company_id = payload.get("companyId")
    admin_username = payload.get("adminUsername")
    email = payload.get("email")
    exp = payload.get("exp")

    if company_id is None or not admin_username or not email or exp is None:
        return None

    try:
        return TokenData(
            company_id=int(company_id),
            admin_username=admin_username,
            email=email,
            exp=datetime.fromtimestamp(exp, tz=UTC),
            type=payload.get("type", ACCESS_TOKEN_TYPE),
        )
    except (TypeError, ValueError):
        return None
