"""Authentication API routes."""

from fastapi import APIRouter, Response, status

from lowcode.config import settings
from lowcode.core.auth.schemas import TokenResponse
from lowcode.core.auth.service import AuthSvc
from lowcode.core.constants import AUTH_COOKIE_NAME
from lowcode.modules.users.schemas import LoginRequest


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email and password",
    description=(
        "Authenticate with email and password. The access token is returned "
        "and also set as an HTTP-only cookie."
    ),
)
async def login(
    data: LoginRequest,
    service: AuthSvc,
    response: Response,
) -> TokenResponse:
    """Login with email and password."""
    tokens = await service.login(email=data.email, password=data.password)

    response.set_cookie(
        AUTH_COOKIE_NAME,
        tokens.access_token,
        max_age=tokens.expires_in,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return tokens


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Logout",
    description="Clear the authentication cookie.",
)
async def logout(response: Response) -> None:
    """Clear the auth cookie."""
    response.delete_cookie(AUTH_COOKIE_NAME)
