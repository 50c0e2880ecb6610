"""Request context middleware.

This module provides middleware for:
- Request tracing with unique IDs
- Binding the authenticated principal to the log context
"""

import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from lowcode.core.auth.backend import decode_token
from lowcode.core.constants import AUTH_COOKIE_NAME


if TYPE_CHECKING:
    from starlette.types import ASGIApp


class PrincipalContextMiddleware(BaseHTTPMiddleware):
    """Expose the token's user id and role on request.state and in logs.

    This never rejects a request; authentication is enforced by the
    route dependencies.
    """

    def __init__(
        self,
        app: "ASGIApp",
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or [
            "/health",
            "/docs",
            "/redoc",
            "/openapi.json",
            "/api/v1/auth/login",
        ]

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if any(request.url.path.startswith(path) for path in self.exclude_paths):
            return await call_next(request)

        token: str | None = None
        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.startswith("Bearer "):
            token = auth_header.split(" ", 1)[1]
        else:
            token = request.cookies.get(AUTH_COOKIE_NAME)

        token_data = decode_token(token) if token else None
        if token_data:
            request.state.user_id = token_data.user_id
            request.state.role = token_data.role.value

            structlog.contextvars.bind_contextvars(
                user_id=token_data.user_id,
                role=token_data.role.value,
            )

        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Middleware that adds a unique request ID to each request.

    The request ID is added to:
    - request.state.request_id
    - Response header X-Request-ID
    - Structlog context
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        request.state.request_id = request_id
        request.state.trace_id = request_id  # Alias for error handler

        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id", "user_id", "role")

        response.headers["X-Request-ID"] = request_id
        return response
