"""User API routes.

Note: Login lives in the auth module. This module handles user
management endpoints.
"""

from fastapi import Query, status

from lowcode.core.auth.dependencies import AdminPrincipal, CurrentPrincipal
from lowcode.modules.users import router
from lowcode.modules.users.schemas import (
    UserCreate,
    UserListResponse,
    UserResponse,
)
from lowcode.modules.users.services import UserSvc


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
    description="Returns the currently authenticated user's profile.",
)
async def get_me(
    principal: CurrentPrincipal,
    service: UserSvc,
) -> UserResponse:
    """Get current user profile."""
    user = await service.get_user(principal.id)
    return UserResponse.model_validate(user)


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users",
    description="List users, optionally filtered by email or name. Requires the Admin role.",
)
async def list_users(
    service: UserSvc,
    principal: AdminPrincipal,  # noqa: ARG001 - required for auth
    limit: int = Query(20, ge=1, le=100, description="Maximum number of users"),
    offset: int = Query(0, ge=0, description="Number of users to skip"),
    search: str | None = Query(None, description="Part of an email or name"),
) -> UserListResponse:
    """List users."""
    users, total = await service.list_users(limit, offset, search)
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in users],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Create a user with a role. Requires the Admin role.",
)
async def create_user(
    data: UserCreate,
    service: UserSvc,
    principal: AdminPrincipal,  # noqa: ARG001 - required for auth
) -> UserResponse:
    """Create a user."""
    user = await service.create_user(data)
    return UserResponse.model_validate(user)
