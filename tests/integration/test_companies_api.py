# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for role-guarded company endpoints."""

from erp_access.models.enums import UserRole


class TestListCompanies:
    """Tests for GET /api/v1/companies."""

    def test_requires_authentication(self, client):
        assert client.get("/api/v1/companies").status_code == 401

    def test_unit_head_sees_own_company(self, client, login, unit_head, company, other_company):
        login(unit_head)

        response = client.get("/api/v1/companies")

        assert response.status_code == 200
        assert [c["code"] for c in response.json()] == ["NORTH"]

    def test_unit_manager_is_allowed(self, client, login, make_user, company):
        login(make_user("manager", UserRole.UNIT_MANAGER, company=company))
        assert client.get("/api/v1/companies").status_code == 200

    def test_super_admin_sees_all(self, admin_client, company, other_company):
        response = admin_client.get("/api/v1/companies")
        assert [c["code"] for c in response.json()] == ["NORTH", "SOUTH"]

    def test_other_roles_are_forbidden(self, client, login, make_user, company):
        login(make_user("seller", UserRole.SALES, company=company))
        response = client.get("/api/v1/companies")
        assert response.status_code == 403
        assert response.json()["detail"] == "Forbidden"

    def test_role_check_ignores_matrix(self, client, login, make_user, company):
        # a fully empty matrix does not matter to role-guarded routes
        login(make_user("bare_head", UserRole.UNIT_HEAD, company=company, permissions={}))
        assert client.get("/api/v1/companies").status_code == 200


class TestCreateCompany:
    """Tests for POST /api/v1/companies."""

    def test_super_admin_creates(self, admin_client):
        response = admin_client.post(
            "/api/v1/companies", json={"name": "East Unit", "code": "EAST"}
        )
        assert response.status_code == 201
        assert response.json()["is_active"] is True

    def test_duplicate_code(self, admin_client, company):
        response = admin_client.post(
            "/api/v1/companies", json={"name": "Another North", "code": "NORTH"}
        )
        assert response.status_code == 409

    def test_unit_head_is_forbidden(self, client, login, unit_head):
        login(unit_head)
        response = client.post("/api/v1/companies", json={"name": "East Unit", "code": "EAST"})
        assert response.status_code == 403
