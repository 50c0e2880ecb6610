"""Data module - records of runtime-defined models."""

from fastapi import APIRouter


router = APIRouter(prefix="/data", tags=["data"])

# Import routes to register them (must be after router is defined)
from lowcode.modules.data import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "data",
    "version": "1.0.0",
    "description": "CRUD on records of runtime-defined models",
    "dependencies": ["models"],
}
