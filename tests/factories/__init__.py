"""Test data factories."""

from tests.factories.auth import PrincipalFactory, headers_for
from tests.factories.models import make_field, make_model, product_payload
from tests.factories.user import UserCreateFactory


__all__ = [
    "PrincipalFactory",
    "UserCreateFactory",
    "headers_for",
    "make_field",
    "make_model",
    "product_payload",
]
