"""User service for business logic."""

from typing import Annotated

import structlog
from fastapi import Depends

from lowcode.core.auth.backend import hash_password
from lowcode.core.errors import ConflictError, NotFoundError
from lowcode.modules.users.models import User
from lowcode.modules.users.repos import UserRepo
from lowcode.modules.users.schemas import UserCreate


log = structlog.get_logger()


class UserService:
    """Service for user management operations."""

    def __init__(self, repo: UserRepo) -> None:
        self.repo = repo

    async def create_user(self, data: UserCreate) -> User:
        """Create a new user with password.

        Args:
            data: User creation data; the email is already lower-cased

        Returns:
            The created user

        Raises:
            ConflictError: If the email is already registered
        """
        existing = await self.repo.get_by_email(data.email)
        if existing:
            raise ConflictError(
                "Email already registered",
                error_code="email_exists",
                details={"email": data.email},
            )

        user = User(
            email=data.email,
            name=data.name,
            password_hash=hash_password(data.password),
            role=data.role.value,
        )
        user = await self.repo.create(user)

        log.info("user_created", user_id=user.id, role=user.role)
        return user

    async def get_user(self, user_id: str) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If user doesn't exist
        """
        user = await self.repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found", resource="user", resource_id=user_id)
        return user

    async def list_users(
        self,
        limit: int = 20,
        offset: int = 0,
        search: str | None = None,
    ) -> tuple[list[User], int]:
        return await self.repo.list_users(limit, offset, search)


# Type alias for dependency injection
UserSvc = Annotated[UserService, Depends(UserService)]
