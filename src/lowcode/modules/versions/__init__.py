"""Versions module - history of model definition changes."""

from fastapi import APIRouter


router = APIRouter(prefix="/model-versions", tags=["model-versions"])

# Import routes to register them (must be after router is defined)
from lowcode.modules.versions import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "versions",
    "version": "1.0.0",
    "description": "Model definition version history",
    "dependencies": ["models"],
}
