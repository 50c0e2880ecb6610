"""Models module - runtime model definitions."""

from fastapi import APIRouter


router = APIRouter(prefix="/models", tags=["models"])

# Import routes to register them (must be after router is defined)
from lowcode.modules.models import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "models",
    "version": "1.0.0",
    "description": "Runtime model definitions",
    "dependencies": [],
}
