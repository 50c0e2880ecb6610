"""Pydantic schemas for record endpoints.

Record shapes are defined at runtime, so records travel as plain JSON
objects; only the list envelope is fixed.
"""

from typing import Any

from pydantic import BaseModel


class RecordListResponse(BaseModel):
    items: list[dict[str, Any]]
    total: int
