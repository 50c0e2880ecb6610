"""Model definition builders for tests."""

from typing import Any

from lowcode.core.permissions.models import PermissionRule
from lowcode.core.validation.schemas import ModelDefinition, ModelField


def make_field(name: str, type: str = "string", **validation: Any) -> ModelField:
    """Build a field; keyword arguments become its validation rules."""
    data: dict[str, Any] = {"name": name, "type": type}
    if validation:
        data["validation"] = validation
    return ModelField.model_validate(data)


def make_model(
    name: str = "Product",
    fields: list[ModelField] | None = None,
    owner_field: str | None = None,
    permissions: PermissionRule | dict[str, list[str]] | None = None,
) -> ModelDefinition:
    """Build a model definition; everyone may do everything by default."""
    if permissions is None:
        permissions = {
            "create": ["Admin", "Manager", "Viewer"],
            "read": ["Admin", "Manager", "Viewer"],
            "update": ["Admin", "Manager", "Viewer"],
            "delete": ["Admin", "Manager", "Viewer"],
        }
    return ModelDefinition.model_validate(
        {
            "name": name,
            "fields": fields if fields is not None else [make_field("name", required=True)],
            "ownerField": owner_field,
            "permissions": permissions,
        }
    )


def product_payload() -> dict[str, Any]:
    """JSON body of a Product model owned through ``ownerId``."""
    return {
        "name": "Product",
        "fields": [
            {"name": "name", "type": "string", "validation": {"required": True, "maxLength": 200}},
            {"name": "price", "type": "number", "validation": {"required": True, "min": 0}},
            {"name": "ownerId", "type": "string"},
        ],
        "ownerField": "ownerId",
        "permissions": {
            "create": ["Admin", "Manager"],
            "read": ["Admin", "Manager", "Viewer"],
            "update": ["Admin", "Manager"],
            "delete": ["Admin"],
        },
    }
