"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Extracting and validating JWT tokens (header or cookie)
- Getting the current principal
- Gating endpoints on a minimum role
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from lowcode.core.auth.backend import decode_token
from lowcode.core.auth.schemas import Principal, TokenData
from lowcode.core.constants import AUTH_COOKIE_NAME
from lowcode.core.errors import ForbiddenError, UnauthorizedError
from lowcode.core.permissions.roles import Role, outranks


logger = structlog.get_logger()

# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_data(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Extract and validate token data.

    The Authorization header wins; the ``auth_token`` cookie is used
    when no header is sent.

    Raises:
        UnauthorizedError: If token is missing or invalid
    """
    token = credentials.credentials if credentials else None
    if not token:
        token = request.cookies.get(AUTH_COOKIE_NAME)

    if not token:
        raise UnauthorizedError(
            "Not authenticated",
            error_code="missing_token",
        )

    token_data = decode_token(token)
    if not token_data:
        raise UnauthorizedError(
            "Invalid or expired token",
            error_code="invalid_token",
        )

    if token_data.type != "access":
        raise UnauthorizedError(
            "Invalid token type",
            error_code="invalid_token_type",
        )

    return token_data


async def get_current_principal(
    token_data: Annotated[TokenData, Depends(get_token_data)],
) -> Principal:
    """Get the authenticated principal for this request."""
    return token_data.to_principal()


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


def require_role(minimum: Role) -> Callable[[Principal], Awaitable[Principal]]:
    """Build a dependency that admits principals at or above a role.

    Usage:
        @router.delete("/{name}")
        async def delete_model(principal: Annotated[Principal, Depends(require_role(Role.ADMIN))]):
            ...

    Args:
        minimum: The lowest role allowed through

    Returns:
        Dependency returning the principal

    Raises:
        ForbiddenError: If the principal's role is below ``minimum``
    """

    async def dependency(principal: CurrentPrincipal) -> Principal:
        if not outranks(principal.role, minimum):
            logger.warning(
                "role_requirement_denied",
                user_id=principal.id,
                role=principal.role.value,
                required_role=minimum.value,
            )
            raise ForbiddenError(
                f"{minimum.value} role required",
                error_code="insufficient_role",
                details={"required_role": minimum.value},
            )
        return principal

    return dependency


AdminPrincipal = Annotated[Principal, Depends(require_role(Role.ADMIN))]
