"""Dynamic field and record validation."""

from lowcode.core.validation.fields import TYPE_CHECKS, validate_field
from lowcode.core.validation.models import validate_model_data
from lowcode.core.validation.schemas import (
    FieldType,
    FieldValidation,
    ModelDefinition,
    ModelField,
)


__all__ = [
    "TYPE_CHECKS",
    "FieldType",
    "FieldValidation",
    "ModelDefinition",
    "ModelField",
    "validate_field",
    "validate_model_data",
]
