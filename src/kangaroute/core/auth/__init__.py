"""Authentication module for JWT and password handling.

The router and service are imported from their own modules
(``kangaroute.core.auth.routes``, ``kangaroute.core.auth.service``) because
they depend on the companies module.
"""

from kangaroute.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from kangaroute.core.auth.dependencies import (
    CurrentTenant,
    TenantId,
    get_current_tenant,
    get_tenant_id,
    get_token_data,
)
from kangaroute.core.auth.middleware import RequestIdMiddleware, TenantContextMiddleware
from kangaroute.core.auth.schemas import TokenData


__all__ = [
    # Dependencies
    "CurrentTenant",
    # Middleware
    "RequestIdMiddleware",
    "TenantContextMiddleware",
    "TenantId",
    # Schemas
    "TokenData",
    # Token utilities
    "create_access_token",
    "decode_token",
    "get_current_tenant",
    "get_tenant_id",
    "get_token_data",
    # Password utilities
    "hash_password",
    "verify_password",
]
