"""Root API router: probes at the top level, features under ``/api/v1``."""

from fastapi import APIRouter

from lowcode.api.health import router as health_router
from lowcode.core.auth.routes import router as auth_router
from lowcode.modules import discover_modules


v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(auth_router)

for module_router in discover_modules():
    v1_router.include_router(module_router)

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(v1_router)
