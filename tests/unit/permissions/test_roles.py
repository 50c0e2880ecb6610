"""Unit tests for the role hierarchy."""

import itertools

import pytest

from lowcode.core.permissions.roles import ROLE_WEIGHTS, Role, outranks


pytestmark = pytest.mark.unit


class TestRole:
    """Tests for the Role enumeration."""

    def test_values(self):
        assert [r.value for r in Role] == ["Admin", "Manager", "Viewer"]

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValueError):
            Role("Owner")

    def test_weights(self):
        assert ROLE_WEIGHTS == {Role.ADMIN: 3, Role.MANAGER: 2, Role.VIEWER: 1}


class TestOutranks:
    """Tests for outranks()."""

    @pytest.mark.parametrize(
        ("role", "other", "expected"),
        [
            (Role.ADMIN, Role.MANAGER, True),
            (Role.ADMIN, Role.VIEWER, True),
            (Role.MANAGER, Role.VIEWER, True),
            (Role.MANAGER, Role.ADMIN, False),
            (Role.VIEWER, Role.MANAGER, False),
            (Role.VIEWER, Role.ADMIN, False),
        ],
    )
    def test_ordering(self, role, other, expected):
        assert outranks(role, other) is expected

    @pytest.mark.parametrize("role", list(Role))
    def test_reflexive(self, role):
        assert outranks(role, role)

    def test_total(self):
        """Any two roles are comparable in at least one direction."""
        for a, b in itertools.product(Role, repeat=2):
            assert outranks(a, b) or outranks(b, a)

    def test_transitive(self):
        for a, b, c in itertools.product(Role, repeat=3):
            if outranks(a, b) and outranks(b, c):
                assert outranks(a, c)

    def test_accepts_role_strings(self):
        assert outranks("Admin", "Viewer")

    def test_unknown_role_raises(self):
        with pytest.raises(ValueError):
            outranks("Superuser", Role.VIEWER)
