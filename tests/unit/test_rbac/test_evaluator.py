# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for permission evaluation."""

import pytest

from erp_access.models.enums import Action, UserRole
from erp_access.rbac.evaluator import (
    accessible_modules,
    can,
    can_access_module,
    has_module_access,
    is_allowed,
    role_allowed,
)
from erp_access.rbac.permissions import MODULE_CATALOG, MODULE_FEATURE, empty_matrix
from erp_access.rbac.roles import default_matrix


@pytest.fixture
def matrix():
    """A matrix granting sales.orders.edit only."""
    m = empty_matrix()
    m["sales"]["orders"]["edit"] = True
    return m


class TestCan:
    """Tests for the single-flag lookup."""

    def test_granted_flag(self, matrix):
        assert can(matrix, "sales", "orders", "edit") is True

    def test_flags_are_independent(self, matrix):
        # edit does not imply view
        assert can(matrix, "sales", "orders", "view") is False

    @pytest.mark.parametrize(
        "module,feature,action",
        [
            ("warehouse", "orders", "edit"),
            ("sales", "missing", "edit"),
            ("sales", "orders", "approve"),
            ("", "", ""),
        ],
    )
    def test_missing_path_is_false(self, matrix, module, feature, action):
        assert can(matrix, module, feature, action) is False

    @pytest.mark.parametrize(
        "bad",
        [None, [], "sales", {"sales": None}, {"sales": {"orders": ["edit"]}}],
    )
    def test_malformed_matrix_is_false(self, bad):
        assert can(bad, "sales", "orders", "edit") is False

    def test_truthy_non_bool_is_false(self):
        assert can({"sales": {"orders": {"edit": 1}}}, "sales", "orders", "edit") is False
        assert can({"sales": {"orders": {"edit": "yes"}}}, "sales", "orders", "edit") is False

    def test_accepts_action_enum(self, matrix):
        assert can(matrix, "sales", "orders", Action.EDIT) is True


class TestModuleAccess:
    """Tests for derived module visibility."""

    def test_any_feature_flag_opens_module(self, matrix):
        assert can_access_module(matrix, "sales") is True

    def test_all_false_module_is_closed(self, matrix):
        assert can_access_module(matrix, "production") is False

    def test_plain_module(self):
        m = empty_matrix()
        m["inventory"][MODULE_FEATURE]["delete"] = True
        assert can_access_module(m, "inventory") is True

    def test_unknown_module(self, matrix):
        assert can_access_module(matrix, "warehouse") is False

    def test_visibility_follows_feature_flags(self, matrix):
        matrix["sales"]["orders"]["edit"] = False
        assert can_access_module(matrix, "sales") is False


class TestRoleAwareDecisions:
    """Tests for decisions combining role, active flag and matrix."""

    @pytest.mark.parametrize("role", [UserRole.SUPER_ADMIN, UserRole.SUPER_USER])
    def test_super_roles_bypass_all_false_matrix(self, role):
        blank = empty_matrix()
        for module in MODULE_CATALOG:
            assert has_module_access(role, blank, module.name) is True
            for key in module.feature_keys:
                assert is_allowed(role, blank, module.name, key, "delete") is True

    def test_super_roles_bypass_even_without_a_matrix(self):
        assert is_allowed("Super Admin", None, "anything", "at", "all") is True

    def test_regular_role_uses_matrix(self, matrix):
        assert is_allowed(UserRole.SALES, matrix, "sales", "orders", "edit") is True
        assert is_allowed(UserRole.SALES, matrix, "sales", "orders", "view") is False

    def test_inactive_user_is_denied_before_anything_else(self, matrix):
        assert is_allowed(UserRole.SALES, matrix, "sales", "orders", "edit", is_active=False) is False
        assert is_allowed(UserRole.SUPER_ADMIN, matrix, "sales", "orders", "edit", is_active=False) is False
        assert has_module_access(UserRole.SALES, matrix, "sales", is_active=False) is False
        assert accessible_modules(UserRole.SUPER_ADMIN, matrix, is_active=False) == []

    def test_role_allowed(self):
        allowed = [UserRole.UNIT_HEAD, "Unit Manager"]
        assert role_allowed(UserRole.UNIT_HEAD, allowed) is True
        assert role_allowed("Unit Manager", allowed) is True
        assert role_allowed(UserRole.SALES, allowed) is False
        assert role_allowed("Janitor", allowed) is False
        assert role_allowed(UserRole.SUPER_USER, allowed) is True
        assert role_allowed(UserRole.UNIT_HEAD, allowed, is_active=False) is False

    def test_accessible_modules_for_sales_defaults(self):
        modules = accessible_modules(UserRole.SALES, default_matrix(UserRole.SALES))
        assert modules == ["dashboard", "sales", "customers"]

    def test_accessible_modules_for_super_role(self):
        modules = accessible_modules(UserRole.SUPER_ADMIN, empty_matrix())
        assert modules == [module.name for module in MODULE_CATALOG]
