"""User repository for database operations."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy import func, or_, select

from lowcode.api.dependencies import DBSession
from lowcode.modules.users.models import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user.

        Returns:
            The created user with ID populated
        """
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: str) -> User | None:
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by (already normalized) email address."""
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_users(
        self,
        limit: int = 20,
        offset: int = 0,
        search: str | None = None,
    ) -> tuple[list[User], int]:
        """List users ordered by email.

        Args:
            limit: Maximum number of users
            offset: Number of users to skip
            search: Optional text matched against email and name

        Returns:
            Tuple of (users list, total count)
        """
        condition = (
            or_(User.email.contains(search), User.name.contains(search))
            if search
            else None
        )

        count_stmt = select(func.count()).select_from(User)
        stmt = select(User).order_by(User.email).offset(offset).limit(limit)
        if condition is not None:
            count_stmt = count_stmt.where(condition)
            stmt = stmt.where(condition)

        total = (await self.session.execute(count_stmt)).scalar_one()
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total


# Type alias for dependency injection
UserRepo = Annotated[UserRepository, Depends(UserRepository)]
