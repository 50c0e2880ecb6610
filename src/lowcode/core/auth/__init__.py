"""Authentication: passwords, JWT tokens and request principals."""

from lowcode.core.auth.backend import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from lowcode.core.auth.dependencies import (
    AdminPrincipal,
    CurrentPrincipal,
    get_current_principal,
    require_role,
)
from lowcode.core.auth.middleware import PrincipalContextMiddleware, RequestIdMiddleware
from lowcode.core.auth.schemas import Principal, TokenData, TokenResponse


__all__ = [
    # Dependencies
    "AdminPrincipal",
    "CurrentPrincipal",
    # Schemas
    "Principal",
    # Middleware
    "PrincipalContextMiddleware",
    "RequestIdMiddleware",
    "TokenData",
    "TokenResponse",
    # Token utilities
    "create_access_token",
    "decode_token",
    "get_current_principal",
    # Password utilities
    "hash_password",
    "require_role",
    "verify_password",
]
