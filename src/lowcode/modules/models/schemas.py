"""Pydantic schemas for model definition endpoints."""

from pydantic import BaseModel

from lowcode.core.permissions.models import PermissionRule
from lowcode.core.validation.schemas import ModelDefinition


class ModelDefinitionCreate(ModelDefinition):
    """Payload for creating or replacing a model definition.

    Timestamps are assigned by the server; omitted permissions fall back
    to the default rule.
    """

    permissions: PermissionRule | None = None


class ModelDefinitionListResponse(BaseModel):
    items: list[ModelDefinition]
    total: int
