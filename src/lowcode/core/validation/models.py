"""Whole-record validation against a model definition."""

from collections.abc import Mapping
from typing import Any

from lowcode.core.validation.fields import validate_field
from lowcode.core.validation.schemas import ModelDefinition


def validate_model_data(
    data: Mapping[str, Any],
    model: ModelDefinition,
) -> dict[str, str]:
    """Validate a record payload against every declared field.

    Keys in ``data`` that the model does not declare are ignored; they
    are neither reported nor removed.

    Args:
        data: Candidate record payload
        model: The model definition to validate against

    Returns:
        Mapping of field name to error message, empty when valid
    """
    errors: dict[str, str] = {}

    for field in model.fields:
        error = validate_field(data.get(field.name), field)
        if error:
            errors[field.name] = error

    return errors
