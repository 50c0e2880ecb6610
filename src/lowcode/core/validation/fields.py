"""Per-field validation driven by runtime model definitions.

``validate_field`` never raises for odd input: values of unexpected shape
are coerced where possible and otherwise reported as a type mismatch.
Only the first failing check of a field is reported.
"""

import math
import re
from collections.abc import Callable
from datetime import date
from typing import Any

from dateutil import parser as date_parser
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from lowcode.core.validation.schemas import FieldType, FieldValidation, ModelField


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
BOOLEAN_STRINGS = frozenset({"true", "false"})

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _to_number(value: Any) -> float | None:
    """Coerce a value to a finite number, None if it can't be.

    Digit-group underscores (``"1_000"``) are not accepted in strings.
    """
    if isinstance(value, bool):
        return float(value)
    try:
        if isinstance(value, int | float):
            number = float(value)
        elif isinstance(value, str) and "_" not in value:
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None

    return number if math.isfinite(number) else None


def _to_string(value: Any) -> str:
    """Text form of a value for length, pattern and format checks.

    Lists become their items' text joined by commas, with None items as
    empty strings. Mappings and other objects use ``str()``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list | tuple):
        return ",".join(_to_string(item) for item in value)
    return str(value)


def _check_string_constraints(
    text: str, field: ModelField, validation: FieldValidation
) -> str | None:
    name = field.display_name

    if validation.min_length is not None and len(text) < validation.min_length:
        return f"{name} must be at least {validation.min_length} characters"
    if validation.max_length is not None and len(text) > validation.max_length:
        return f"{name} must be at most {validation.max_length} characters"
    if validation.pattern:
        try:
            matched = re.fullmatch(validation.pattern, text) is not None
        except re.error:
            matched = False
        if not matched:
            return f"{name} format is invalid"

    return None


def _check_string(value: Any, field: ModelField, validation: FieldValidation) -> str | None:
    return _check_string_constraints(_to_string(value), field, validation)


def _check_email(value: Any, field: ModelField, validation: FieldValidation) -> str | None:
    text = _to_string(value)
    error = _check_string_constraints(text, field, validation)
    if error:
        return error
    if not EMAIL_PATTERN.fullmatch(text):
        return f"{field.display_name} must be a valid email"
    return None


def _check_url(value: Any, field: ModelField, validation: FieldValidation) -> str | None:
    text = _to_string(value)
    error = _check_string_constraints(text, field, validation)
    if error:
        return error
    try:
        _url_adapter.validate_python(text)
    except PydanticValidationError:
        return f"{field.display_name} must be a valid URL"
    return None


def _check_number(value: Any, field: ModelField, validation: FieldValidation) -> str | None:
    name = field.display_name
    number = _to_number(value)

    if number is None:
        return f"{name} must be a number"
    if validation.min is not None and number < validation.min:
        return f"{name} must be at least {validation.min}"
    if validation.max is not None and number > validation.max:
        return f"{name} must be at most {validation.max}"

    return None


def _check_date(value: Any, field: ModelField, validation: FieldValidation) -> str | None:  # noqa: ARG001
    if isinstance(value, date):
        return None
    # Accepts ISO-8601, slash-separated, written-out and RFC 2822 forms
    try:
        date_parser.parse(_to_string(value))
    except (ValueError, OverflowError):
        return f"{field.display_name} must be a valid date"
    return None


def _check_boolean(value: Any, field: ModelField, validation: FieldValidation) -> str | None:  # noqa: ARG001
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value in BOOLEAN_STRINGS:
        return None
    return f"{field.display_name} must be a boolean value"


TypeCheck = Callable[[Any, ModelField, FieldValidation], str | None]

# One check per FieldType member; tests assert the table stays exhaustive.
TYPE_CHECKS: dict[FieldType, TypeCheck] = {
    FieldType.STRING: _check_string,
    FieldType.NUMBER: _check_number,
    FieldType.BOOLEAN: _check_boolean,
    FieldType.DATE: _check_date,
    FieldType.EMAIL: _check_email,
    FieldType.URL: _check_url,
}


def validate_field(value: Any, field: ModelField) -> str | None:
    """Validate one value against its field definition.

    Args:
        value: The candidate value (None when the key is missing)
        field: The field definition

    Returns:
        An error message, or None if the value is acceptable
    """
    if _is_empty(value):
        if field.is_required:
            return f"{field.display_name} is required"
        return None

    validation = field.validation or FieldValidation()
    return TYPE_CHECKS[field.type](value, field, validation)
