"""Model definition schemas.

These are the runtime-supplied schemas that drive record validation.
JSON payloads use camelCase keys (``minLength``, ``ownerField``); Python
code uses snake_case attribute names.
"""

import re
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from lowcode.core.constants import MAX_FIELD_NAME_LENGTH, MAX_MODEL_NAME_LENGTH
from lowcode.core.permissions.models import PermissionRule


class FieldType(StrEnum):
    """Supported field types."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    EMAIL = "email"
    URL = "url"


class CamelModel(BaseModel):
    """Base for schemas exchanged as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class FieldValidation(CamelModel):
    """Optional constraints for one field; any combination may apply."""

    required: bool | None = None
    min: int | float | None = None
    max: int | float | None = None
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)
    pattern: str | None = None

    @field_validator("pattern")
    @classmethod
    def pattern_compiles(cls, v: str | None) -> str | None:
        """Reject patterns that are not valid regular expressions."""
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid pattern: {e}") from e
        return v


class ModelField(CamelModel):
    """A single field of a model definition.

    Attributes:
        name: Key of the value in a record
        type: Declared field type
        validation: Optional constraints
        label: Human-readable name used in error messages
        required: Legacy location of the required flag, OR-ed with
            ``validation.required``
    """

    name: str = Field(..., min_length=1, max_length=MAX_FIELD_NAME_LENGTH)
    type: FieldType
    validation: FieldValidation | None = None
    label: str | None = None
    required: bool | None = None

    @property
    def display_name(self) -> str:
        return self.label or self.name

    @property
    def is_required(self) -> bool:
        validation_required = bool(self.validation and self.validation.required)
        return validation_required or bool(self.required)


class ModelDefinition(CamelModel):
    """Schema of one dynamic entity type."""

    name: str = Field(..., min_length=1, max_length=MAX_MODEL_NAME_LENGTH)
    fields: list[ModelField]
    owner_field: str | None = None
    permissions: PermissionRule = Field(default_factory=PermissionRule)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Model names are trimmed and must not be blank."""
        v = v.strip()
        if not v:
            raise ValueError("Model name cannot be empty")
        return v

    @field_validator("owner_field")
    @classmethod
    def blank_owner_field_is_none(cls, v: str | None) -> str | None:
        return v or None

    @model_validator(mode="after")
    def field_names_unique(self) -> "ModelDefinition":
        """Field names are record keys, so they must be unique."""
        seen: set[str] = set()
        for field in self.fields:
            if field.name in seen:
                raise ValueError(f"Duplicate field name: {field.name}")
            seen.add(field.name)
        return self
