"""Authentication service for login."""

from typing import Annotated

import structlog
from fastapi import Depends

from lowcode.api.dependencies import DBSession
from lowcode.config import settings
from lowcode.core.auth.backend import create_access_token, verify_password
from lowcode.core.auth.schemas import Principal, TokenResponse
from lowcode.core.errors import UnauthorizedError
from lowcode.modules.users.models import User
from lowcode.modules.users.repos import UserRepository
from lowcode.modules.users.schemas import normalize_email


log = structlog.get_logger()


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: DBSession) -> None:
        self.db = db
        self.user_repo = UserRepository(db)

    async def authenticate(self, email: str, password: str) -> User:
        """Check a user's credentials.

        Raises:
            UnauthorizedError: If the email is unknown or the password wrong
        """
        user = await self.user_repo.get_by_email(normalize_email(email))
        if not user or not verify_password(password, user.password_hash):
            log.warning("login_failed", email=normalize_email(email))
            raise UnauthorizedError(
                "Invalid email or password",
                error_code="invalid_credentials",
            )
        return user

    async def login(self, email: str, password: str) -> TokenResponse:
        """Authenticate a user with email and password.

        Returns:
            An access token carrying the user's id and role
        """
        user = await self.authenticate(email, password)
        principal = Principal(id=user.id, role=user.role)

        log.info("login_succeeded", user_id=user.id, role=user.role)

        return TokenResponse(
            access_token=create_access_token(principal),
            expires_in=settings.access_token_expire_minutes * 60,
        )


# Type alias for dependency injection
AuthSvc = Annotated[AuthService, Depends(AuthService)]
