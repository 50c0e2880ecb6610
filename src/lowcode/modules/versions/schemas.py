"""Pydantic schemas for model version responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class ModelVersionResponse(BaseModel):
    """One recorded version of a model definition."""

    model_config = ConfigDict(from_attributes=True)

    model_name: str
    version: int
    definition: dict[str, Any]
    change_description: str
    created_by: str
    created_at: datetime


class ModelVersionListResponse(BaseModel):
    items: list[ModelVersionResponse]
    total: int
